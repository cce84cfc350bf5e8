"""
    ednlib - read and write a Lisp flavoured sibling of JSON

        decode('{:a [1 2.5 "x"]}')          # {'a': (1, 2.5, 'x')}
        encode({'a': (1, 2.5, 'x')})        # '{"a" [1 2.5 "x"]}'
"""
from .codec import Codec
from .config import DecodeConfig, EncodeConfig
from .encoder import encode
from .errors import *
from .reader import decode, decode_all
from .values import Keyword, Symbol, timestamp_pair, pair_to_datetime
