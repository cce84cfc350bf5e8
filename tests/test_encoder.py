import sys
from datetime import datetime, timezone, timedelta

import pytest

from ednlib.config import EncodeConfig
from ednlib.encoder import encode, encode_char
from ednlib.errors import UnencodableValue, EncoderError
from ednlib.reader import decode
from ednlib.values import Keyword, Symbol, timestamp_pair

UTC_STAMPS = EncodeConfig(timestamps=True, tz=timezone.utc)
WHEN = datetime(2017, 11, 22, 23, 32, 7, tzinfo=timezone.utc)


def check_dump(obj, buf, config=None):
    assert encode(obj, config) == buf

def check_dump_err(obj, exc, config=None):
    with pytest.raises(exc) as e:
        encode(obj, config)
    return e.value


def test_literals():
    check_dump(True, "true")
    check_dump(False, "false")
    check_dump(None, "nil")

def test_configured_nil_and_false():
    NIL, FALSE = object(), object()
    config = EncodeConfig(nil=NIL, false=FALSE)
    check_dump(NIL, "nil", config)
    check_dump(FALSE, "false", config)
    check_dump(True, "true", config)
    check_dump_err(None, UnencodableValue, config)
    check_dump_err(False, UnencodableValue, config)

def test_aliased_nil_and_false():
    check_dump(None, "nil", EncodeConfig(false=None))

def test_numbers():
    check_dump(150, "150")
    check_dump(-3, "-3")
    check_dump(1.5, "1.5")
    check_dump(-0.25, "-0.25")
    check_dump(1e16, "1e+16")
    check_dump(12345678901234567890, "12345678901234567890")

def test_non_finite_numbers():
    check_dump_err(float('inf'), UnencodableValue)
    check_dump_err(float('-inf'), UnencodableValue)
    check_dump_err(float('nan'), UnencodableValue)

def test_strings():
    check_dump("hello world", '"hello world"')
    check_dump("", '""')
    check_dump("a\nb", '"a\\nb"')
    check_dump('say "hi"\\', '"say \\"hi\\"\\\\"')
    check_dump("\b\f\r\t", '"\\b\\f\\r\\t"')
    check_dump("é", '"\\u00e9"')
    check_dump("\x00\x7f", '"\\u0000\\u007f"')
    check_dump("\U0001F600", '"\\ud83d\\ude00"')

def test_encode_char():
    assert encode_char(" ") == " "
    assert encode_char("~") == "~"
    assert encode_char("\x1f") == "\\u001f"
    assert encode_char("ሴ") == "\\u1234"
    assert encode_char("ꯍ") == "\\uabcd"

def test_escaped_string_reads_back():
    assert decode(encode("a\nb")) == "a\nb"
    assert len(decode(encode("a\nb"))) == 3

def test_identifiers():
    check_dump(Keyword('a'), ":a")
    check_dump(Keyword('ns/a-b?'), ":ns/a-b?")
    check_dump(Symbol('a'), '"a"')
    check_dump(Symbol('with "quote"'), '"with \\"quote\\""')

def test_symbols_read_back_as_strings():
    assert decode(encode(Symbol('a'))) == 'a'

def test_vectors():
    check_dump(("hello", "world"), '["hello" "world"]')
    check_dump((), "[]")
    check_dump((1, (2, 3)), "[1 [2 3]]")
    check_dump(([], [1]), "[nil (1)]")

def test_maps():
    check_dump({}, "{}")
    check_dump({'a': 1, 'b': (1, 2)}, '{"a" 1 "b" [1 2]}')
    check_dump({Keyword('a'): {Keyword('b'): None}}, "{:a {:b nil}}")

def test_plain_lists():
    check_dump(["hello", "world"], '("hello" "world")')
    check_dump([1, [2, [3]]], "(1 (2 (3)))")
    check_dump([1, 2, 3], "(1 2 3)")

def test_empty_list_is_nil():
    check_dump([], "nil")

def test_assoc_lists():
    check_dump([(Symbol('a'), 1), (Symbol('b'), 2)], '{"a" 1 "b" 2}')
    check_dump([(1, 2), (3, 4)], "{1 2 3 4}")

def test_odd_pair_count_is_a_plain_list():
    check_dump([(1, 2)], "([1 2])")
    check_dump([(1, 2), (3, 4), (5, 6)], "([1 2] [3 4] [5 6])")

def test_not_all_pairs_is_a_plain_list():
    check_dump([(1, 2), (3, 4, 5)], "([1 2] [3 4 5])")
    check_dump([(1, 2), [3, 4]], "([1 2] (3 4))")

def test_flat_maps():
    check_dump([Keyword('a'), 1, Keyword('b'), 2], "{:a 1 :b 2}")
    check_dump([Keyword('a'), [Keyword('b'), 2]], "{:a {:b 2}}")

def test_broken_flat_maps_are_plain_lists():
    check_dump([Keyword('a'), 1, Keyword('b')], "(:a 1 :b)")
    check_dump([Keyword('a'), 1, 'b', 2], '(:a 1 "b" 2)')

def test_timestamps_off_by_default():
    check_dump(timestamp_pair(WHEN), "({} {})".format(*timestamp_pair(WHEN)))
    check_dump([1, 2], "(1 2)")

def test_timestamps():
    check_dump(timestamp_pair(WHEN), '#inst "2017-11-22T23:32:07+00:00"', UTC_STAMPS)
    plus2 = EncodeConfig(timestamps=True, tz=timezone(timedelta(hours=2)))
    check_dump(timestamp_pair(WHEN), '#inst "2017-11-23T01:32:07+02:00"', plus2)
    check_dump([0, 0], '#inst "1970-01-01T00:00:00+00:00"', UTC_STAMPS)

def test_timestamps_in_local_time():
    out = encode(timestamp_pair(WHEN), EncodeConfig(timestamps=True))
    assert out.startswith('#inst "')
    stamp = datetime.fromisoformat(out[len('#inst "'):-1])
    assert stamp == WHEN

def test_timestamp_shape_rules():
    check_dump([True, 1], "(true 1)", UTC_STAMPS)
    check_dump([1.0, 2], "(1.0 2)", UTC_STAMPS)
    check_dump([1, 2, 3], "(1 2 3)", UTC_STAMPS)
    # pairs and keyword lists are claimed first
    check_dump([(1, 2), (3, 4)], "{1 2 3 4}", UTC_STAMPS)
    check_dump([Keyword('a'), 2], "{:a 2}", UTC_STAMPS)

def test_timestamp_out_of_range():
    check_dump_err([2 ** 60, 0], UnencodableValue, UTC_STAMPS)

def test_datetimes():
    check_dump(WHEN, '#inst "2017-11-22T23:32:07+00:00"', EncodeConfig(tz=timezone.utc))

def test_sets():
    check_dump({1}, "#{1}")
    check_dump(frozenset(), "#{}")

def test_unencodable():
    for obj in (object(), b"bytes", 1 + 2j, range(3)):
        err = check_dump_err(obj, UnencodableValue)
        assert err.value is obj
        assert isinstance(err, EncoderError)

def test_unencodable_inside_container():
    err = check_dump_err({'a': [1, object()]}, UnencodableValue)
    assert type(err.value) is object

@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
def test_huge_integers():
    err = check_dump_err(10 ** 5000, UnencodableValue)
    assert err.value == 10 ** 5000
    check_dump_err([1, 10 ** 5000], UnencodableValue)

def test_surrogates_in_strings():
    check_dump_err(chr(0xD83D) + chr(0xDE00), UnencodableValue)
    err = check_dump_err("a\udc00", UnencodableValue)
    assert err.value == "a\udc00"
    check_dump("\U0001F600", '"\\ud83d\\ude00"')
    assert len(decode(encode("\U0001F600"))) == 1
