import pytest

from instantiator.core.config import InstantiatorConfig
from instantiator.core.primitives import Char, Float32, Int8, Int16, Int64


def test_config_defaults():
    config = InstantiatorConfig()

    assert config.seed is None
    assert config.max_depth == 64
    assert config.generators == {}
    assert all(factory is None for factory in config.slot_overrides().values())


def test_config_validation():
    # Valid config
    config = InstantiatorConfig(max_depth=3, seed=0)
    assert config.max_depth == 3
    assert config.seed == 0

    # Depth ceiling must allow at least one level
    with pytest.raises(ValueError):
        InstantiatorConfig(max_depth=0)

    # and stay well inside the interpreter call stack
    assert InstantiatorConfig(max_depth=256).max_depth == 256
    with pytest.raises(ValueError):
        InstantiatorConfig(max_depth=257)

    # Slots only accept callables
    with pytest.raises(ValueError):
        InstantiatorConfig(int_generator=42)


def test_generator_keys_must_be_types():
    with pytest.raises(ValueError, match="generator keys must be types"):
        InstantiatorConfig(generators={"int": lambda: 1})


def test_slot_overrides_map_to_semantic_types():
    def fixed_int():
        return 42

    def fixed_char():
        return "x"

    config = InstantiatorConfig(int_generator=fixed_int, char_generator=fixed_char)
    slots = config.slot_overrides()

    assert slots[int] is fixed_int
    assert slots[Char] is fixed_char
    assert set(slots) == {int, Int64, Int16, Int8, float, Float32, str, Char, bool}
    assert slots[Int64] is None
