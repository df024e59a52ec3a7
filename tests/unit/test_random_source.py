import numpy as np
import pytest

from instantiator.core.random_source import RandomSource


def test_integer_ranges():
    source = RandomSource(seed=7)

    for _ in range(200):
        assert -2**31 <= source.int32() < 2**31
        assert -2**63 <= source.int64() < 2**63
        assert -2**15 <= source.int16() < 2**15
        assert -128 <= source.int8() < 128


def test_values_have_python_types():
    source = RandomSource(seed=7)

    assert type(source.int32()) is int
    assert type(source.int64()) is int
    assert type(source.float64()) is float
    assert type(source.float32()) is float
    assert type(source.boolean()) is bool
    assert type(source.text()) is str


def test_float32_values_are_single_precision():
    source = RandomSource(seed=3)

    for _ in range(50):
        value = source.float32()
        assert 0.0 <= value < 1.0
        assert float(np.float32(value)) == value


def test_text_and_char():
    source = RandomSource(seed=11)

    for _ in range(50):
        text = source.text()
        assert 1 <= len(text) <= 20
        char = source.char()
        assert len(char) == 1
        assert char.isalpha()


def test_boolean_produces_both_values():
    source = RandomSource(seed=5)
    values = {source.boolean() for _ in range(100)}
    assert values == {True, False}


def test_choice_is_roughly_uniform():
    source = RandomSource(seed=13)
    options = ["a", "b", "c"]

    picks = [source.choice(options) for _ in range(3000)]
    counts = np.array([picks.count(option) for option in options])

    assert counts.sum() == 3000
    # Each bucket should be near 1000 for a uniform pick
    assert np.all(np.abs(counts - 1000) < 150)


def test_choice_rejects_empty_sequence():
    with pytest.raises(ValueError, match="empty"):
        RandomSource(seed=1).choice([])


def test_same_seed_same_sequence():
    source1 = RandomSource(seed=42)
    source2 = RandomSource(seed=42)

    sequence1 = [source1.int32(), source1.text(), source1.char(), source1.float64(), source1.boolean()]
    sequence2 = [source2.int32(), source2.text(), source2.char(), source2.float64(), source2.boolean()]

    assert sequence1 == sequence2
