import pytest

from hash_algorithms import registry
from hash_algorithms.algorithms import ConsistentHash, DJBHash, KetamaHash, NativeHash, SimpleHash
from hash_algorithms.config import HashingConfig
from hash_algorithms.exceptions import HashingError, UnknownAlgorithmError
from hash_algorithms.int32 import INT32_MIN
from hash_algorithms.models import HashAlgorithmName


def test_default_instances():
    assert isinstance(registry.NATIVE_HASH, NativeHash)
    assert isinstance(registry.KETAMA_HASH, KetamaHash)
    assert isinstance(registry.DJB_HASH, DJBHash)
    assert isinstance(registry.SIMPLE_HASH, SimpleHash)
    assert isinstance(registry.CONSISTENT_HASH, ConsistentHash)
    assert registry.CONSISTENT_HASH.delegate is registry.KETAMA_HASH


def test_get_algorithm_by_name_or_enum():
    assert registry.get_algorithm("djb") is registry.DJB_HASH
    assert registry.get_algorithm(" Ketama ") is registry.KETAMA_HASH
    assert registry.get_algorithm(HashAlgorithmName.SIMPLE) is registry.SIMPLE_HASH
    for name in registry.available_algorithms():
        assert registry.get_algorithm(name).name.value == name


def test_get_algorithm_unknown_name():
    with pytest.raises(UnknownAlgorithmError) as excinfo:
        registry.get_algorithm("crc32")
    assert excinfo.value.name == "crc32"
    assert isinstance(excinfo.value, HashingError)


def test_available_algorithms_is_closed_set():
    assert registry.available_algorithms() == ["native", "ketama", "djb", "consistent", "simple"]


def test_create_algorithm_returns_fresh_instances():
    created = registry.create_algorithm("ketama")
    assert created is not registry.KETAMA_HASH
    assert created.hash("hello") == registry.KETAMA_HASH.hash("hello")


def test_create_algorithm_honours_config():
    cfg = HashingConfig(
        text_encoding="latin-1",
        consistent_delegate="djb",
        min_value_policy="zero",
    )
    simple = registry.create_algorithm("simple", cfg)
    assert simple.encoding == "iso8859-1"

    consistent = registry.create_algorithm(HashAlgorithmName.CONSISTENT, cfg)
    assert isinstance(consistent.delegate, DJBHash)
    assert consistent.hash("server1:11211-0") == 1444124614


def test_build_algorithm_uses_default_algorithm():
    assert isinstance(registry.build_algorithm(HashingConfig()), ConsistentHash)
    assert isinstance(registry.build_algorithm(HashingConfig(default_algorithm="native")), NativeHash)


def test_created_consistent_hash_applies_policy(monkeypatch):
    monkeypatch.setattr(KetamaHash, "hash", lambda self, key: INT32_MIN)
    algo = registry.create_algorithm("consistent", HashingConfig(min_value_policy="zero"))
    assert algo.hash("x") == 0
