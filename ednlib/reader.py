"""
    the reader: text in, values out

    `Reader.read()` skips whitespace, peeks at one character, and calls the
    handler that `dispatch` lists for it. container handlers call `read()`
    again for each element, so nesting is plain recursion.

    grammar, by lead character:

        0-9 + - .       number      -12, 3.5, .5, 1e10
        "               string      "a\\n\\u00e9"
        :               keyword     :name
        '               symbol      'name
        ( [ {           list, vector, map
        #               set         #{1 2 3}
        t f n           true, false, nil

    commas between elements are optional
"""
import io
import re

from .config import DEFAULT_DECODE
from .containers import lookup_strategy, lookup_key_coercion
from .errors import *
from .scanner import Scanner, END, WHITESPACE
from .values import Keyword, Symbol

CLOSERS = frozenset(")]}")
TERMINATORS = WHITESPACE | CLOSERS | {','}

unsigned_number = re.compile(r"([0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
hex4 = re.compile(r"[0-9a-fA-F]{4}")
plain_chars = re.compile(r'[^"\\]*')

str_escapes = {
    '"': '"',
    '\\': '\\',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

literal_words = {'t': 'true', 'f': 'false', 'n': 'nil'}


def as_text(source):
    if isinstance(source, (bytes, bytearray)):
        return source.decode('utf-8')
    return source


class Reader:
    def __init__(self, scanner, config=None):
        if config is None:
            config = DEFAULT_DECODE
        self.scanner = scanner
        self.config = config
        self.strategy = lookup_strategy(config.strategy)
        self.coerce_key = lookup_key_coercion(config.key_type, self.strategy)
        self.literals = {'true': True, 'false': config.false, 'nil': config.nil}

    def error(self, cls, reason=None, pos=None):
        s = self.scanner
        return cls(s.buf, s.pos if pos is None else pos, reason)

    def token_at(self, pos):
        """The text from pos up to the next terminator, for error messages"""
        buf = self.scanner.buf
        end = pos
        while end < len(buf) and buf[end] not in TERMINATORS:
            end += 1
        return buf[pos:end]

    def read(self):
        s = self.scanner
        s.skip_whitespace()
        peek = s.peek()
        if peek is END:
            raise self.error(EndOfInput, "Expected a value, but found end of input")
        handler = dispatch.get(peek)
        if handler is None:
            raise self.error(UnknownConstruct, "Nothing can be read starting with {} (context: {})".format(
                repr(peek), repr(self.token_at(s.pos)[:15])))
        return handler(self)

    def skip_separator(self):
        s = self.scanner
        s.skip_whitespace()
        if s.peek() == ',':
            s.advance()
        s.skip_whitespace()

    # true, false, nil

    def read_literal(self):
        s = self.scanner
        start = s.pos
        word = literal_words[s.peek()]
        for c in word:
            if s.peek() != c:
                raise self.error(UnrecognizedLiteral, "{} is not a recognised literal, expected {}".format(
                    repr(self.token_at(start)), word), pos=start)
            s.advance()
        peek = s.peek()
        if peek is not END and peek not in TERMINATORS:
            raise self.error(UnrecognizedLiteral, "{} is not a recognised literal, expected {}".format(
                repr(self.token_at(start)), word), pos=start)
        return self.literals[word]

    # Numbers

    def read_number(self):
        s = self.scanner
        start = s.pos
        sign = s.peek()
        if sign == '-' or sign == '+':
            s.advance()
            value = self.read_unsigned(start)
            return -value if sign == '-' else value
        return self.read_unsigned(start)

    def read_unsigned(self, start):
        s = self.scanner
        m = unsigned_number.match(s.buf, s.pos)
        whole, fraction, exponent = m.groups()
        if not whole and not fraction:
            raise self.error(InvalidNumberFormat, "Invalid number: {}".format(
                repr(self.token_at(start))), pos=start)
        s.pos = m.end()
        if fraction or exponent:
            return float(m.group())
        try:
            return int(m.group())
        except ValueError:
            # too many digits for int(), keep the value and lose the precision
            return float(m.group())

    # Strings

    def read_string(self):
        s = self.scanner
        buf = s.buf
        start = s.pos
        s.advance()
        out = io.StringIO()
        while True:
            m = plain_chars.match(buf, s.pos)
            out.write(m.group())
            s.pos = m.end()
            c = s.peek()
            if c is END:
                raise UnterminatedString(buf, start, "Unterminated string")
            s.advance()
            if c == '"':
                return out.getvalue()
            out.write(self.read_escape(start))

    def read_escape(self, start):
        s = self.scanner
        c = s.peek()
        if c is END:
            raise UnterminatedString(s.buf, start, "Unterminated string")
        s.advance()
        if c in str_escapes:
            return str_escapes[c]
        elif c == 'u':
            n = self.read_hex4()
            if 0xD800 <= n <= 0xDBFF:
                low = self.read_low_surrogate()
                if low is not None:
                    return chr(0x10000 + ((n - 0xD800) << 10) + (low - 0xDC00))
            return chr(n)
        else:
            return c

    def read_hex4(self):
        s = self.scanner
        m = hex4.match(s.buf, s.pos)
        if not m:
            raise self.error(BadUnicodeEscape, "Expected four hex digits after \\u, but found {}".format(
                repr(s.buf[s.pos:s.pos + 4])), pos=s.pos - 2)
        s.advance(4)
        return int(m.group(), 16)

    def read_low_surrogate(self):
        s = self.scanner
        if not s.buf.startswith('\\u', s.pos):
            return None
        m = hex4.match(s.buf, s.pos + 2)
        if m:
            n = int(m.group(), 16)
            if 0xDC00 <= n <= 0xDFFF:
                s.advance(6)
                return n
        return None

    # Keywords and symbols

    def read_name(self):
        s = self.scanner
        s.advance()
        start = s.pos
        buf = s.buf
        while s.pos < len(buf) and buf[s.pos] not in TERMINATORS:
            s.advance()
        return buf[start:s.pos]

    def read_keyword(self):
        start = self.scanner.pos
        name = self.read_name()
        if not name:
            raise self.error(InvalidKeywordFormat, "Empty keyword", pos=start)
        return Keyword(name)

    def read_symbol(self):
        start = self.scanner.pos
        name = self.read_name()
        if not name:
            raise self.error(InvalidSymbolFormat, "Empty symbol", pos=start)
        return Symbol(name)

    # Containers

    def read_elements(self, closer):
        s = self.scanner
        s.advance()
        s.skip_whitespace()
        out = []
        while s.peek() != closer:
            out.append(self.read())
            self.skip_separator()
        s.advance()
        return out

    def read_list(self):
        return self.read_elements(')')

    def read_vector(self):
        return tuple(self.read_elements(']'))

    def read_set(self):
        s = self.scanner
        s.advance()
        if s.peek() != '{':
            raise self.error(MalformedSet, "Expected '{{' after '#', but found {}".format(
                "end of input" if s.peek() is END else repr(s.peek())))
        return self.read_elements('}')

    def read_map(self):
        s = self.scanner
        s.advance()
        s.skip_whitespace()
        out = self.strategy.empty()
        while s.peek() != '}':
            key_pos = s.pos
            key = self.read()
            s.skip_whitespace()
            if s.peek() in CLOSERS:
                raise self.error(OddMapEntries, "Map key {} has no value".format(repr(key)))
            value = self.read()
            try:
                self.strategy.add(out, self.coerce_key(key), value)
            except TypeError as e:
                raise self.error(InvalidMapKey, "Map key {} cannot be used in a {} map".format(
                    repr(key), self.strategy.name), pos=key_pos) from e
            self.skip_separator()
        s.advance()
        return out


dispatch = {}
for c in "0123456789+-.":
    dispatch[c] = Reader.read_number
for c in literal_words:
    dispatch[c] = Reader.read_literal
dispatch.update({
    '"': Reader.read_string,
    ':': Reader.read_keyword,
    "'": Reader.read_symbol,
    '{': Reader.read_map,
    '[': Reader.read_vector,
    '(': Reader.read_list,
    '#': Reader.read_set,
})


def decode(source, config=None):
    """Read the first value in source, ignoring anything after it"""
    return Reader(Scanner(as_text(source)), config).read()

def decode_all(source, config=None):
    reader = Reader(Scanner(as_text(source)), config)
    s = reader.scanner
    out = []
    s.skip_whitespace()
    while not s.at_end():
        out.append(reader.read())
        s.skip_whitespace()
    return out
