import pytest

from termcells.encoding import (
    ASCII,
    NOP,
    UTF8,
    Encoding,
    EncodingFallback,
    get_encoding,
    register_encoding,
    set_encoding_fallback,
)


@pytest.fixture(autouse=True)
def _reset_fallback():
    set_encoding_fallback(EncodingFallback.FAIL)
    yield
    set_encoding_fallback(EncodingFallback.FAIL)


def test_register_encoding_gbk():
    register_encoding("GBK", Encoding("GBK", "gbk"))
    enc = get_encoding("GBK")
    assert enc.decode(bytes([0x82, 0x74])) == "倀"


def test_lookup_is_case_insensitive():
    register_encoding("X-Test-Latin", Encoding("X-Test-Latin", "latin-1"))
    assert get_encoding("x-test-latin") == get_encoding("X-TEST-LATIN")
    assert get_encoding("x-test-latin").codec == "latin-1"


@pytest.mark.parametrize(
    "name, expected",
    [("UTF-8", UTF8), ("utf8", UTF8), ("US-ASCII", ASCII), ("ascii", ASCII), ("ISO646", ASCII)],
)
def test_builtin_encodings(name, expected):
    assert get_encoding(name) is expected


def test_unknown_with_fail_fallback_is_none():
    assert get_encoding("no-such-charset") is None


def test_unknown_with_ascii_fallback():
    set_encoding_fallback(EncodingFallback.ASCII)
    assert get_encoding("no-such-charset") is ASCII


def test_unknown_with_utf8_fallback():
    set_encoding_fallback(EncodingFallback.UTF8)
    assert get_encoding("no-such-charset") is NOP


def test_nop_passes_bytes_through():
    data = b"\xff\xfe abc"
    assert NOP.encode(NOP.decode(data)) == data


def test_ascii_rejects_non_ascii_text():
    with pytest.raises(UnicodeEncodeError):
        ASCII.encode("é")


def test_ascii_decodes_invalid_bytes_to_replacement():
    assert ASCII.decode(b"a\xffb") == "a\ufffdb"


def test_utf8_round_trip():
    text = "héllo 十月"
    assert UTF8.decode(UTF8.encode(text)) == text


def test_unknown_codec_is_rejected():
    with pytest.raises(LookupError):
        Encoding("bogus", "no-such-codec")