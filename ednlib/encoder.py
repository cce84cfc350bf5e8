"""
    the encoder: values in, text out

    most values are written by type. a list is written by shape, first
    match wins:

        []                              nil
        [(k, v), (k, v)]                {k v k v}    (even count of 2-tuples)
        [:k, v, :k, v]                  {:k v :k v}  (keyword at every even index)
        [high, low]                     #inst "..."  (only with timestamps on)
        anything else                   (a b c)

    dicts and sets are written in their own iteration order, which is not
    sorted and may differ between runs for sets
"""
import io
import math
from datetime import datetime

from .config import DEFAULT_ENCODE
from .errors import UnencodableValue
from .values import (Identifier, Keyword, is_number, format_number, is_integer_pair,
    pair_to_datetime, format_datetime)

escaped = {
    '"': '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}

def encode_char(c):
    if c in escaped:
        return escaped[c]
    if ' ' <= c <= '~':
        return c
    n = ord(c)
    if n > 0xFFFF:
        n -= 0x10000
        return '\\u{:04x}\\u{:04x}'.format(0xD800 + (n >> 10), 0xDC00 + (n & 0x3FF))
    return '\\u{:04x}'.format(n)

def is_alist(obj):
    return len(obj) % 2 == 0 and all(isinstance(x, tuple) and len(x) == 2 for x in obj)

def is_flat_map(obj):
    return len(obj) % 2 == 0 and all(isinstance(k, Keyword) for k in obj[::2])


class Encoder:
    def __init__(self, config=None):
        if config is None:
            config = DEFAULT_ENCODE
        self.config = config

    def encode(self, obj):
        buf = io.StringIO()
        self.dump(obj, buf)
        return buf.getvalue()

    def dump(self, obj, buf):
        config = self.config
        if obj is config.nil:
            buf.write('nil')
        elif obj is True:
            buf.write('true')
        elif obj is config.false:
            buf.write('false')
        elif isinstance(obj, str):
            self.dump_string(obj, buf)
        elif isinstance(obj, Keyword):
            buf.write(str(obj))
        elif isinstance(obj, Identifier):
            # symbols are written as strings, and read back as strings
            self.dump_string(obj.name, buf)
        elif is_number(obj):
            if isinstance(obj, float) and not math.isfinite(obj):
                raise UnencodableValue(obj, "Cannot encode non-finite number: {!r}".format(obj))
            try:
                buf.write(format_number(obj))
            except ValueError as e:
                raise UnencodableValue(obj, "Number has too many digits to write") from e
        elif isinstance(obj, dict):
            self.dump_pairs(obj.items(), buf)
        elif isinstance(obj, tuple):
            self.dump_items('[', obj, ']', buf)
        elif isinstance(obj, list):
            self.dump_list(obj, buf)
        elif isinstance(obj, (set, frozenset)):
            self.dump_items('#{', obj, '}', buf)
        elif isinstance(obj, datetime):
            self.dump_inst(obj, buf)
        else:
            raise UnencodableValue(obj)

    def dump_string(self, obj, buf):
        buf.write('"')
        for c in obj:
            if '\ud800' <= c <= '\udfff':
                raise UnencodableValue(obj, "Cannot encode surrogate {!r} in string".format(c))
            buf.write(encode_char(c))
        buf.write('"')

    def dump_items(self, opener, items, closer, buf):
        buf.write(opener)
        first = True
        for x in items:
            if first:
                first = False
            else:
                buf.write(' ')
            self.dump(x, buf)
        buf.write(closer)

    def dump_pairs(self, pairs, buf):
        buf.write('{')
        first = True
        for k, v in pairs:
            if first:
                first = False
            else:
                buf.write(' ')
            self.dump(k, buf)
            buf.write(' ')
            self.dump(v, buf)
        buf.write('}')

    def dump_list(self, obj, buf):
        if not obj:
            buf.write('nil')
        elif is_alist(obj):
            self.dump_pairs(obj, buf)
        elif is_flat_map(obj):
            self.dump_pairs(zip(obj[::2], obj[1::2]), buf)
        elif self.config.timestamps and is_integer_pair(obj):
            try:
                when = pair_to_datetime(obj, self.config.tz)
            except (OverflowError, OSError, ValueError) as e:
                raise UnencodableValue(obj, "Timestamp out of range: {!r}".format(obj)) from e
            self.dump_inst(when, buf)
        else:
            self.dump_items('(', obj, ')', buf)

    def dump_inst(self, obj, buf):
        buf.write('#inst ')
        self.dump_string(format_datetime(obj, self.config.tz), buf)


def encode(value, config=None):
    return Encoder(config).encode(value)
