"""
    how decoded maps are built, and what their keys become

    a container strategy makes an empty container, adds key/value pairs to
    it, and names the key coercion it uses when the caller picks none:

    - hash:  dict, keys as strings
    - alist: list of (key, value) tuples, keys as symbols
    - flat:  list of key, value, key, value..., keys as keywords
"""
from .errors import ConfigError
from .values import Identifier, Keyword, Symbol, is_number, format_number

# Key coercion

def key_as_string(key):
    if isinstance(key, Identifier):
        return key.name
    if is_number(key):
        return format_number(key)
    return key

def key_as_symbol(key):
    if isinstance(key, (Identifier, str)):
        return Symbol(key)
    return key

def key_as_keyword(key):
    if isinstance(key, (Identifier, str)):
        return Keyword(key)
    return key

def key_unchanged(key):
    return key

key_coercions = {
    'string': key_as_string,
    'symbol': key_as_symbol,
    'keyword': key_as_keyword,
    'none': key_unchanged,
}

# Container strategies

class HashStrategy:
    name = 'hash'
    default_key_type = 'string'

    def empty(self):
        return {}

    def add(self, out, key, value):
        # later duplicates win
        out[key] = value


class AssocListStrategy:
    name = 'alist'
    default_key_type = 'symbol'

    def empty(self):
        return []

    def add(self, out, key, value):
        out.append((key, value))


class FlatStrategy:
    name = 'flat'
    default_key_type = 'keyword'

    def empty(self):
        return []

    def add(self, out, key, value):
        out.append(key)
        out.append(value)


container_strategies = {s.name: s for s in (HashStrategy(), AssocListStrategy(), FlatStrategy())}

def lookup_strategy(name):
    if name not in container_strategies:
        raise ConfigError('Unknown container strategy: {!r}, expected one of {}'.format(
            name, ", ".join(sorted(container_strategies))))
    return container_strategies[name]

def lookup_key_coercion(key_type, strategy):
    if key_type is None:
        key_type = strategy.default_key_type
    if key_type not in key_coercions:
        raise ConfigError('Unknown key type: {!r}, expected one of {}'.format(
            key_type, ", ".join(sorted(key_coercions))))
    return key_coercions[key_type]
