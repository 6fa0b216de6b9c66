from typing import Any

from .shared import printf
from .table import HashTable


def print_table(table: HashTable[Any, Any], name: str):
    printf("== {0:s} ==\n", name)

    for index, bucket in enumerate(table.buckets()):
        print_bucket(index, bucket)

    printf("count: {0:d}\n", table.count)


def print_bucket(index: int, bucket: tuple[tuple[Any, Any], ...]):
    printf("{0:04d} ", index)
    if not bucket:
        printf("   -\n")
        return

    for position, (key, value) in enumerate(bucket):
        if position > 0:
            printf("     ")
        printf("{0:4d} {1!r} -> {2!r}\n", position, key, value)
