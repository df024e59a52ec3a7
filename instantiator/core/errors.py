from typing import Any


class InstantiationError(Exception):
    """Base class for every failure raised while building an instance."""

    def __init__(self, message: str, type_: Any = None):
        super().__init__(message)
        self.type = type_


class UnsupportedConstructionError(InstantiationError):
    """The target class has no constructor that can be called reflectively."""


class UnresolvedTypeError(InstantiationError):
    """No generator, singleton, enum or constructor rule applies to the type."""


class RecursionLimitExceeded(InstantiationError):
    """Nested construction went deeper than the configured ``max_depth``."""
