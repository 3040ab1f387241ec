"""Regression vectors and determinism for the character/byte hashes."""

import pytest

from hash_algorithms.algorithms import DJBHash, NativeHash, SimpleHash
from hash_algorithms.exceptions import KeyEncodingError

FOX = "The quick brown fox jumps over the lazy dog"


@pytest.mark.parametrize(
    "key, expected",
    [
        ("", 0),
        ("hello", 99162322),
        ("abc", 96354),
        (FOX, -609428141),
        ("a" * 20, 1542361408),
        ("hé", 3457),
    ],
)
def test_native_hash_vectors(key, expected):
    assert NativeHash().hash(key) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("", 5381),
        ("hello", 261238937),
        ("abc", 193485963),
        (FOX, 885799134),
        ("a" * 20, 998035673),
        ("server1:11211-0", -1444124614),
        ("hé", 5863574),
    ],
)
def test_djb_hash_vectors(key, expected):
    assert DJBHash().hash(key) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("", 0),
        ("hello", -328373272),
        ("abc", -2064608928),
        (FOX, -1996011687),
        ("server1:11211-0", 2038324305),
        ("é", 1023434832),
        ("hé", 1040280072),
    ],
)
def test_simple_hash_vectors(key, expected):
    assert SimpleHash().hash(key) == expected


def test_simple_hash_bytes_are_sign_extended():
    # 0xc3 0xa9 read as -61, -87
    assert SimpleHash().hash(b"\xc3\xa9") == 1023434832
    assert SimpleHash().hash(bytearray(b"hello")) == -328373272


def test_simple_hash_absent_key():
    assert SimpleHash().hash(None) == 0
    assert SimpleHash().hash(b"") == 0


def test_simple_hash_encoding():
    latin = SimpleHash(encoding="latin-1")
    assert latin.encoding == "iso8859-1"
    assert latin.hash("é") == SimpleHash().hash(b"\xe9")
    with pytest.raises(KeyEncodingError):
        SimpleHash(encoding="ascii").hash("é")
    with pytest.raises(KeyEncodingError):
        SimpleHash(encoding="no-such-codec")


@pytest.mark.parametrize("codec", ["rot13", "hex", "base64"])
def test_simple_hash_rejects_non_text_codecs(codec):
    with pytest.raises(KeyEncodingError) as excinfo:
        SimpleHash(encoding=codec)
    assert excinfo.value.encoding == codec
    assert isinstance(excinfo.value.__cause__, LookupError)


def test_text_hashes_accept_utf8_bytes():
    assert NativeHash().hash(b"hello") == 99162322
    assert DJBHash().hash("hé".encode("utf-8")) == 5863574
    with pytest.raises(KeyEncodingError):
        DJBHash().hash(b"\xff")


@pytest.mark.parametrize("algorithm_cls", [NativeHash, DJBHash, SimpleHash])
def test_results_are_deterministic_int32(algorithm_cls):
    keys = ["", "a", "hello", FOX, "中文", "x" * 1000]
    first, second = algorithm_cls(), algorithm_cls()
    for key in keys:
        value = first.hash(key)
        assert value == first.hash(key) == second.hash(key)
        assert -(2**31) <= value <= 2**31 - 1


def test_instances_are_callable():
    djb = DJBHash()
    assert djb("hello") == djb.hash("hello")
    assert repr(djb) == "DJBHash()"
