"""
    a cursor over an in-memory document

    one scanner belongs to one decode call, it is not shared
"""
from .errors import EndOfInput

END = None

WHITESPACE = frozenset(" \t\n\f\b\r")

class Scanner:
    def __init__(self, buf, pos=0):
        self.buf = buf
        self.pos = pos

    def peek(self):
        if self.pos < len(self.buf):
            return self.buf[self.pos]
        return END

    def pop(self):
        if self.pos >= len(self.buf):
            raise EndOfInput(self.buf, self.pos)
        c = self.buf[self.pos]
        self.pos += 1
        return c

    def advance(self, n=1):
        self.pos += n

    def at_end(self):
        return self.pos >= len(self.buf)

    def skip_whitespace(self):
        buf, pos = self.buf, self.pos
        while pos < len(buf) and buf[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def __repr__(self):
        return "<Scanner pos={} of {}>".format(self.pos, len(self.buf))
