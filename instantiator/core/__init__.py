"""Core instantiator components."""

from .config import InstantiatorConfig
from .descriptors import ConstructorParameter, TypeDescriptor, TypeKind, describe
from .errors import (
    InstantiationError,
    RecursionLimitExceeded,
    UnresolvedTypeError,
    UnsupportedConstructionError,
)
from .instantiator import Instantiator, instance
from .primitives import Char, Float32, Int8, Int16, Int64
from .random_source import RandomSource
from .registry import GeneratorRegistry, register_generator

__all__ = [
    "InstantiatorConfig",
    "ConstructorParameter",
    "TypeDescriptor",
    "TypeKind",
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
    "RandomSource",
    "GeneratorRegistry",
    "register_generator",
]
