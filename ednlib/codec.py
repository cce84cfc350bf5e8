"""
    a reader and an encoder sharing one configuration

        codec = Codec(DecodeConfig(strategy='alist'), EncodeConfig(timestamps=True))
        codec.parse(b'{:a 1}')      # [(Symbol('a'), 1)]
        codec.dump([1, 2])          # '#inst "..."'
"""
from .config import DEFAULT_DECODE, DEFAULT_ENCODE
from .containers import lookup_strategy, lookup_key_coercion
from .encoder import Encoder
from .reader import decode, decode_all

CONTENT_TYPE = "application/edn"

class Codec:
    content_type = CONTENT_TYPE

    def __init__(self, decode_config=None, encode_config=None):
        self.decode_config = decode_config or DEFAULT_DECODE
        self.encode_config = encode_config or DEFAULT_ENCODE
        # fail now rather than on first parse
        lookup_key_coercion(self.decode_config.key_type, lookup_strategy(self.decode_config.strategy))
        self.encoder = Encoder(self.encode_config)

    def parse(self, buf):
        return decode(buf, self.decode_config)

    def parse_all(self, buf):
        return decode_all(buf, self.decode_config)

    def dump(self, obj):
        return self.encoder.encode(obj)

    def dump_bytes(self, obj):
        return self.encoder.encode(obj).encode('utf-8')
