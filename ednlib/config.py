"""
    per-call configuration

    both records are immutable: use `config._replace(...)` to derive a
    variant, never assign to a shared default

    DecodeConfig
        strategy    'hash', 'alist' or 'flat'
        key_type    'string', 'symbol', 'keyword', 'none', or None to use the
                    strategy's own default
        nil, false  the objects `nil` and `false` decode to

    EncodeConfig
        timestamps  write [high, low] integer lists as #inst "..."
        tz          timezone for #inst, None for local time
        nil, false  the objects written as `nil` and `false`

    nil and false must be different objects: if they are the same, a value
    that is both encodes as nil, and false does not survive a round trip
"""
from collections import namedtuple

DecodeConfig = namedtuple('DecodeConfig', 'strategy key_type nil false',
    defaults=('hash', None, None, False))

EncodeConfig = namedtuple('EncodeConfig', 'timestamps tz nil false',
    defaults=(False, None, None, False))

DEFAULT_DECODE = DecodeConfig()
DEFAULT_ENCODE = EncodeConfig()
