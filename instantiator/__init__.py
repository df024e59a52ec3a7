"""INSTANTIATOR - Reflective test-data generator for throwaway fixtures."""

__version__ = "0.1.0"
__description__ = "Build fully populated instances of data classes for tests"

from .core.config import InstantiatorConfig
from .core.descriptors import TypeDescriptor, describe
from .core.errors import (
    InstantiationError,
    RecursionLimitExceeded,
    UnresolvedTypeError,
    UnsupportedConstructionError,
)
from .core.instantiator import Instantiator, instance
from .core.primitives import Char, Float32, Int8, Int16, Int64
from .core.registry import GeneratorRegistry, register_generator

__all__ = [
    "InstantiatorConfig",
    "TypeDescriptor",
    "describe",
    "InstantiationError",
    "RecursionLimitExceeded",
    "UnresolvedTypeError",
    "UnsupportedConstructionError",
    "Instantiator",
    "instance",
    "Char",
    "Float32",
    "Int8",
    "Int16",
    "Int64",
    "GeneratorRegistry",
    "register_generator",
]
