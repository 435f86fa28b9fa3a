import math

import pytest

from mockdash.generators.seeded import seeded_random, string_to_seed


def test_string_to_seed_rolling_hash():
    assert string_to_seed("") == 0
    assert string_to_seed("a") == 97
    assert string_to_seed("ab") == 97 * 31 + 98
    assert string_to_seed("hello") == 99162322


def test_string_to_seed_wraps_to_signed_32_bit():
    assert string_to_seed("polygenelubricants") == -2 ** 31
    value = string_to_seed("Sun Jan 07 2024" * 20)
    assert -2 ** 31 <= value < 2 ** 31


def test_string_to_seed_uses_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert string_to_seed("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_numeric_seeds():
    assert seeded_random(0) == 0.0
    assert seeded_random(1) == pytest.approx(0.709848078965, abs=1e-9)
    # sign of the seed folds away through abs()
    assert seeded_random(-1) == pytest.approx(1 - 0.709848078965, abs=1e-9)


def test_string_seed_equals_its_hash():
    assert seeded_random("") == 0.0
    assert seeded_random("hello") == seeded_random(99162322)


def test_deterministic_for_same_seed():
    assert seeded_random("2024-01-01visitors") == seeded_random("2024-01-01visitors")


@pytest.mark.parametrize("seed", ["Sun Jan 07 2024visitors", "x", "event42service", 12345, 2.5, -987654])
def test_value_in_unit_interval(seed):
    value = seeded_random(seed)
    assert 0 <= value < 1
    assert not math.isnan(value)


def test_nearby_seeds_differ():
    values = {seeded_random(f"Sun Jan 07 2024event{i}") for i in range(20)}
    assert len(values) == 20


def test_seeded_random_reference_values():
    assert seeded_random("2024-01-01visitors") == pytest.approx(0.7715578829120204, abs=1e-9)
    assert seeded_random("Sun Jan 07 2024visitors") == pytest.approx(0.9768596102871925, abs=1e-9)
