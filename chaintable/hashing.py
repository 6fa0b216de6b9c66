from typing import Hashable


FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def bucket_index(hash_value: int, capacity: int) -> int:
    assert capacity > 0
    return abs(hash_value % capacity)


def fnv1a(key: Hashable) -> int:
    """32-bit FNV-1a over the key's bytes.

    Unlike the built-in `hash`, the result does not depend on PYTHONHASHSEED,
    so bucket placement is the same in every process.
    """
    match key:
        case bytes() | bytearray():
            data = bytes(key)
        case str():
            data = key.encode("utf-8")
        case bool():
            data = bytes([int(key)])
        case int():
            length = max(1, (key.bit_length() + 8) // 8)
            data = key.to_bytes(length, "little", signed=True)
        case _:
            raise TypeError(f"fnv1a cannot hash {type(key).__name__!r}")

    hash = FNV_OFFSET_BASIS
    for byte in data:
        hash ^= byte
        hash = (hash * FNV_PRIME) & 0xFFFFFFFF
    return hash
