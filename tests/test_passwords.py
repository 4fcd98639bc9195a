from collections import Counter
from itertools import permutations

import pytest

from passforge.errors import EntropySourceUnavailable, InvalidLength, NoCategorySelected
from passforge.models import CharacterCategory, GenerationOptions
from passforge.passwords import (
    PasswordGenerator,
    clamp_length,
    combined_alphabet,
    fisher_yates_shuffle,
    generate_password,
)

from conftest import ScriptedSource, SeededSource


ALL = GenerationOptions(length=16, uppercase=True, lowercase=True, digits=True, symbols=True)


def _all_category_combinations():
    for mask in range(1, 16):
        flags = [bool(mask & (1 << bit)) for bit in range(4)]
        yield GenerationOptions(12, *flags)


@pytest.mark.parametrize("length", [4, 5, 16, 49, 50])
def test_generates_exact_length(length, seeded_source):
    password = generate_password(ALL.with_length(length), seeded_source)
    assert len(password) == length


@pytest.mark.parametrize("options", list(_all_category_combinations()))
def test_characters_come_only_from_enabled_categories(options):
    allowed = set(combined_alphabet(options.categories))
    disabled = set("".join(c.alphabet for c in CharacterCategory if c not in options.categories))
    for seed in range(25):
        password = generate_password(options, SeededSource(seed))
        assert set(password) <= allowed
        assert not set(password) & disabled


@pytest.mark.parametrize("options", list(_all_category_combinations()))
def test_every_enabled_category_is_covered(options):
    for seed in range(25):
        password = generate_password(options.with_length(4), SeededSource(seed))
        for category in options.categories:
            assert any(ch in category.alphabet for ch in password)


@pytest.mark.parametrize("length", [3, 0, -1, 51, 100])
def test_rejects_out_of_range_length(length, zero_source):
    with pytest.raises(InvalidLength) as excinfo:
        generate_password(ALL.with_length(length), zero_source)
    assert (excinfo.value.min, excinfo.value.max, excinfo.value.length) == (4, 50, length)
    assert zero_source.uppers == []


@pytest.mark.parametrize("length", [-1, 0, 3, 4, 10, 50, 51, 100])
def test_rejects_empty_category_set_at_any_length(length, zero_source):
    with pytest.raises(NoCategorySelected):
        generate_password(GenerationOptions(length=length), zero_source)
    assert zero_source.uppers == []


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        generate_password(GenerationOptions(length=8))


def test_golden_output_with_maximal_draws(max_source):
    options = GenerationOptions(length=6, uppercase=True, lowercase=True, digits=True, symbols=True)
    assert generate_password(options, max_source) == "Zz9???"


def test_golden_output_with_minimal_draws(zero_source):
    options = GenerationOptions(length=4, uppercase=True, lowercase=True, digits=True, symbols=True)
    assert generate_password(options, zero_source) == "0!Aa"


def test_draw_sequence_follows_construction(zero_source):
    options = GenerationOptions(length=10, uppercase=True, digits=True, symbols=True)
    generate_password(options, zero_source)
    required = [26, 10, 26]
    required_shuffle = [3, 2]
    filler = [62] * 7
    final_shuffle = list(range(10, 1, -1))
    assert zero_source.uppers == required + required_shuffle + filler + final_shuffle


def test_seeded_source_is_deterministic():
    first = generate_password(ALL, SeededSource(99))
    second = generate_password(ALL, SeededSource(99))
    assert first == second


def test_system_source_produces_distinct_passwords():
    generator = PasswordGenerator()
    assert generator.generate(ALL) != generator.generate(ALL)


def test_out_of_range_draw_fails_closed():
    with pytest.raises(EntropySourceUnavailable):
        generate_password(ALL, ScriptedSource([26]))


def test_source_failure_propagates():
    class BrokenSource:
        def randbelow(self, upper):
            raise EntropySourceUnavailable("no entropy")

    with pytest.raises(EntropySourceUnavailable):
        generate_password(ALL, BrokenSource())


def test_fisher_yates_visits_every_permutation_exactly_once():
    # Enumerate every draw sequence j_3 in [0,3], j_2 in [0,2], j_1 in [0,1].
    seen = Counter()
    for j3 in range(4):
        for j2 in range(3):
            for j1 in range(2):
                items = fisher_yates_shuffle(list("abcd"), ScriptedSource([j3, j2, j1]))
                seen["".join(items)] += 1
    assert set(seen) == {"".join(p) for p in permutations("abcd")}
    assert set(seen.values()) == {1}


def test_fisher_yates_handles_short_sequences(zero_source):
    assert fisher_yates_shuffle([], zero_source) == []
    assert fisher_yates_shuffle(["x"], zero_source) == ["x"]
    assert zero_source.uppers == []


@pytest.mark.parametrize("value, expected", [(-5, 4), (3, 4), (4, 4), (27, 27), (50, 50), (51, 50), (999, 50)])
def test_clamp_length(value, expected):
    assert clamp_length(value) == expected
