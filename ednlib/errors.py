"""
    every way a read or a write can go wrong

    nothing here is recoverable: the call that raised is abandoned
"""
class EdnError(Exception): pass

# Bad configuration handed to a reader or encoder

class ConfigError(EdnError): pass

# Reading: carries the buffer and the position of the problem

class ReaderError(EdnError):
    def __init__(self, buf, pos, reason=None):
        self.buf = buf
        self.pos = pos
        if reason is None:
            if pos < len(buf):
                reason = "Unexpected character {} (context: {})".format(
                    repr(buf[pos]), repr(buf[max(pos - 10, 0):pos + 5]))
            else:
                reason = "Unexpected end of input"
        self.reason = reason
        EdnError.__init__(self, "{} (at pos={})".format(reason, pos))

class EndOfInput(ReaderError): pass
class UnknownConstruct(ReaderError): pass
class UnrecognizedLiteral(ReaderError): pass
class InvalidNumberFormat(ReaderError): pass
class BadUnicodeEscape(ReaderError): pass
class UnterminatedString(ReaderError): pass
class InvalidKeywordFormat(ReaderError): pass
class InvalidSymbolFormat(ReaderError): pass
class OddMapEntries(ReaderError): pass
class MalformedSet(ReaderError): pass
class InvalidMapKey(ReaderError): pass

# Writing: carries the value that could not be written

class EncoderError(EdnError):
    def __init__(self, value, reason=None):
        self.value = value
        if reason is None:
            reason = "Cannot encode {} object: {!r}".format(type(value).__name__, value)
        EdnError.__init__(self, reason)

class UnencodableValue(EncoderError): pass
