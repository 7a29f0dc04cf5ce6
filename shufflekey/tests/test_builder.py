import random

import pytest

from shufflekey.core.builder import (
    ID_SPACE_MAX,
    IdSpaceExhaustedError,
    build_pool,
    generate_id,
    mirror_tables,
    shuffle_in_place,
)


class _ScriptedRandom:
    """Returns the given values in order, repeating the last one."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        idx = min(self.calls, len(self._values) - 1)
        self.calls += 1
        return self._values[idx]


def test_shuffle_follows_swap_with_random_prefix_index():
    symbols = list("abcd")
    shuffle_in_place(symbols, _ScriptedRandom([0.0]))
    # j=1 swaps with 0, j=2 swaps with 0, j=3 swaps with 0
    assert "".join(symbols) == "dabc"


def test_shuffle_never_targets_last_index():
    symbols = list("abcd")
    shuffle_in_place(symbols, _ScriptedRandom([0.999999]))
    # floor(0.999999 * 3) == 2, so index 3 is only touched when j == 3
    assert "".join(symbols) == "cadb"


def test_two_symbol_pool_is_always_reversed():
    for seed in range(20):
        symbols = ["x", "y"]
        shuffle_in_place(symbols, random.Random(seed))
        assert symbols == ["y", "x"]


def test_mirror_tables_pair_opposite_positions():
    encrypt, decrypt = mirror_tables(list("abcd"))
    assert encrypt == {"a": "d", "b": "c", "c": "b", "d": "a"}
    for plain, cipher in encrypt.items():
        assert decrypt[cipher] == plain


def test_mirror_tables_odd_length_keeps_middle_symbol():
    encrypt, _ = mirror_tables(list("abc"))
    assert encrypt["b"] == "b"


def test_mirror_tables_duplicates_later_pairing_wins():
    encrypt, decrypt = mirror_tables(["a", "b", "a", "c"])
    assert encrypt["a"] == "b"
    assert decrypt["a"] == "c"


def test_generate_id_retries_on_collision():
    rng = _ScriptedRandom([0.0, 0.0, 0.5])
    assert generate_id({"0"}, rng) == "11711083227"
    assert rng.calls == 3


def test_generate_id_gives_up_after_budget():
    with pytest.raises(IdSpaceExhaustedError):
        generate_id({"0"}, _ScriptedRandom([0.0]), max_attempts=3)


def test_build_pool_ids_unique_and_numeric():
    pool = build_pool(list("abcdef"), 50, random.Random(11))
    ids = [obj.id for obj in pool]
    assert len(ids) == 50
    assert len(set(ids)) == 50
    assert all(item.isdigit() and 0 <= int(item) <= ID_SPACE_MAX for item in ids)


def test_build_pool_never_mutates_or_aliases_characters():
    canonical = list("abcdefghij")
    snapshot = list(canonical)
    pool = build_pool(canonical, 5, random.Random(3))

    assert canonical == snapshot
    for obj in pool:
        assert obj.characters is not canonical
        assert sorted(obj.characters) == sorted(canonical)
    for left in pool:
        for right in pool:
            if left is not right:
                assert left.characters is not right.characters


def test_build_pool_tables_are_inverse_of_each_other():
    pool = build_pool(list("0123456789"), 3, random.Random(5))
    for obj in pool:
        last = len(obj.characters) - 1
        for j, symbol in enumerate(obj.characters):
            assert obj.encrypt[symbol] == obj.characters[last - j]
            assert obj.decrypt[obj.encrypt[symbol]] == symbol


def test_each_object_shuffles_from_canonical_input():
    canonical = list("abcdefgh")
    pool = build_pool(canonical, 2, random.Random(99))

    replay = random.Random(99)
    replay.random()  # first id draw
    expected = list(canonical)
    shuffle_in_place(expected, replay)
    assert pool[0].characters == expected

    replay.random()  # second id draw
    expected_second = list(canonical)
    shuffle_in_place(expected_second, replay)
    assert pool[1].characters == expected_second


def test_seeded_builds_are_reproducible():
    first = build_pool(list("abcdef"), 4, random.Random(42))
    second = build_pool(list("abcdef"), 4, random.Random(42))
    assert [obj.model_dump() for obj in first] == [obj.model_dump() for obj in second]


def test_independent_builds_differ():
    first = build_pool(list("abcdefghijklmnop"), 10)
    second = build_pool(list("abcdefghijklmnop"), 10)
    assert {obj.id for obj in first} != {obj.id for obj in second}
    assert [obj.characters for obj in first] != [obj.characters for obj in second]
