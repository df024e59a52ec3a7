import logging
from typing import Any, Callable, Dict, List, Optional

from .config import InstantiatorConfig
from .primitives import Char, Float32, Int8, Int16, Int64
from .random_source import RandomSource

log = logging.getLogger(__name__)

InstanceFactory = Callable[[], Any]


class GeneratorRegistry:
    """Exact-match mapping from a type to a zero-argument factory.

    Keys are compared by identity/equality only: registering ``int`` does not
    cover ``bool`` or a ``NewType`` derived from ``int``.
    """

    def __init__(self) -> None:
        self._factories: Dict[Any, InstanceFactory] = {}

    def register(self, key: Any, factory: InstanceFactory) -> None:
        if not callable(factory):
            raise ValueError(f"Generator for {key!r} must be callable, got {factory!r}")
        try:
            hash(key)
        except TypeError:
            raise ValueError(f"Generator key {key!r} is not hashable") from None
        self._factories[key] = factory

    def lookup(self, key: Any) -> Optional[InstanceFactory]:
        try:
            return self._factories.get(key)
        except TypeError:
            # unhashable annotations can never have been registered
            return None

    def list_types(self) -> List[Any]:
        return list(self._factories.keys())

    def __contains__(self, key: Any) -> bool:
        return self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._factories)

    @classmethod
    def defaults(cls, source: RandomSource) -> "GeneratorRegistry":
        """Registry holding the random default for every elementary kind."""
        registry = cls()
        registry.register(int, source.int32)
        registry.register(Int64, source.int64)
        registry.register(Int16, source.int16)
        registry.register(Int8, source.int8)
        registry.register(float, source.float64)
        registry.register(Float32, source.float32)
        registry.register(str, source.text)
        registry.register(Char, source.char)
        registry.register(bool, source.boolean)
        return registry

    @classmethod
    def from_config(cls, config: InstantiatorConfig, source: RandomSource) -> "GeneratorRegistry":
        registry = cls.defaults(source)
        for key, factory in config.slot_overrides().items():
            if factory is not None:
                registry.register(key, factory)
        for key, factory in config.generators.items():
            registry.register(key, factory)
        log.debug("Built generator registry with %d entries", len(registry))
        return registry


def register_generator(key: Any, registry: GeneratorRegistry):
    """Decorator registering a zero-argument function as the factory for ``key``.

    Usage:
        @register_generator(Email, registry)
        def email() -> str:
            return "someone@example.com"
    """
    def decorator(func: InstanceFactory) -> InstanceFactory:
        registry.register(key, func)
        return func
    return decorator
