"""
    the value model: what a decoded document is made of

    - nil, true, false: None, True, False (nil and false can be swapped out
      per call, see config.py)
    - numbers: int and float
    - strings: str
    - keywords and symbols: interned identifiers, compared by identity
    - lists and sets: list
    - vectors: tuple
    - maps: whatever the container strategy builds (see containers.py)

    timestamps only exist on the way out: a two element list of integers
    [high, low] is read as seconds = high * 65536 + low since the epoch
"""
from datetime import datetime, timezone


class Identifier:
    """
        A name with one canonical object per spelling.

        Each subclass owns an intern table, so `Keyword('a') is Keyword('a')`
        but a keyword never equals a symbol of the same name.
    """
    __slots__ = ('name',)
    prefix = ''
    _table = {}

    def __new__(cls, name):
        if isinstance(name, Identifier):
            name = name.name
        if not isinstance(name, str):
            raise TypeError('{} name must be a string, not {!r}'.format(cls.__name__, name))
        obj = cls._table.get(name)
        if obj is None:
            obj = object.__new__(cls)
            obj.name = name
            # setdefault: if two threads race, both get the same winner
            obj = cls._table.setdefault(name, obj)
        return obj

    def __reduce__(self):
        return (self.__class__, (self.name,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self):
        return self.prefix + self.name

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.name)


class Keyword(Identifier):
    __slots__ = ()
    prefix = ':'
    _table = {}


class Symbol(Identifier):
    __slots__ = ()
    _table = {}


# Timestamps

PAIR_SHIFT = 16

def is_integer(obj):
    return isinstance(obj, int) and not isinstance(obj, bool)

def is_integer_pair(obj):
    return isinstance(obj, list) and len(obj) == 2 and is_integer(obj[0]) and is_integer(obj[1])

def timestamp_pair(when):
    """Split a datetime (naive means local time) or epoch seconds into [high, low]"""
    if isinstance(when, datetime):
        seconds = int(when.timestamp())
    else:
        seconds = int(when)
    return [seconds >> PAIR_SHIFT, seconds & ((1 << PAIR_SHIFT) - 1)]

def pair_to_datetime(pair, tz=None):
    high, low = pair
    seconds = (high << PAIR_SHIFT) + low
    obj = datetime.fromtimestamp(seconds, timezone.utc)
    if tz is None:
        return obj.astimezone()
    return obj.astimezone(tz)

def format_datetime(obj, tz=None):
    if obj.tzinfo is None:
        obj = obj.astimezone()
    if tz is not None:
        obj = obj.astimezone(tz)
    return obj.isoformat()

# Numbers

def is_number(obj):
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)

def format_number(obj):
    if isinstance(obj, float):
        return repr(obj)
    return str(int(obj))
