"""Iterating versus deleting over random vectors of growing size."""

import random

from pew import Benchmark, State


def random_vec(n: int) -> list[int]:
    rng = random.Random(n)
    return [rng.getrandbits(64) for _ in range(n)]


def bm_vector_iterate(state: State[list[int]]) -> None:
    for _ in state.get_input():
        pass


def bm_vector_delete(state: State[list[int]]) -> None:
    vec = state.get_input()
    while vec:
        vec.pop()


def bm_vector_sort(state: State[list[int]]) -> None:
    state.get_input().sort()


example2 = (
    Benchmark("example2")
    .with_range(1 << 10, 1 << 20, 4)
    .with_generator(random_vec)
    .with_clone(list.copy)
    .with_benches(bm_vector_iterate, bm_vector_delete, bm_vector_sort)
)
