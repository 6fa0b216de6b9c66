import pytest

from chaintable.hashing import FNV_OFFSET_BASIS, bucket_index, fnv1a


def test_fnv1a_known_values():
    assert fnv1a("") == FNV_OFFSET_BASIS
    assert fnv1a("a") == 0xE40C292C
    assert fnv1a("foobar") == 0xBF9CF968


def test_fnv1a_str_and_bytes_agree():
    for s in ["", "a", "Apple", "héllo"]:
        assert fnv1a(s) == fnv1a(s.encode("utf-8"))
        assert fnv1a(s) == fnv1a(bytearray(s.encode("utf-8")))


def test_fnv1a_ints():
    for i in [0, 1, -1, 255, 256, 2**40, -(2**40)]:
        h = fnv1a(i)
        # should fit in 32 bits and be stable
        assert 0 <= h < 2**32
        assert h == fnv1a(i)

    assert fnv1a(1) != fnv1a(-1)
    assert fnv1a(True) != fnv1a(False)


def test_fnv1a_unsupported():
    with pytest.raises(TypeError):
        fnv1a((1, 2))


def test_bucket_index():
    for capacity in [1, 3, 10]:
        for hash_value in range(-50, 50):
            index = bucket_index(hash_value, capacity)
            assert 0 <= index < capacity

    assert bucket_index(23, 10) == 3
    assert bucket_index(-13, 10) == 7
