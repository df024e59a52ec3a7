import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from .config import InstantiatorConfig
from .descriptors import TypeDescriptor, TypeKind, describe
from .errors import RecursionLimitExceeded, UnresolvedTypeError
from .random_source import RandomSource
from .registry import GeneratorRegistry, InstanceFactory

log = logging.getLogger(__name__)

T = TypeVar("T")


class Instantiator:
    """Builds fully populated instances of a type by reflecting on its shape.

    Resolution order for every requested type:

    1. a factory registered for the type (user overrides always win),
    2. the shared instance of a singleton type,
    3. a uniformly random member of an enum,
    4. the class constructor, called with a recursively built value for
       every parameter, in declaration order.

    Nothing is cached between calls: two fields of the same type get two
    independently generated values.
    """

    def __init__(self, config: Optional[InstantiatorConfig] = None,
                 registry: Optional[GeneratorRegistry] = None):
        self.config = config or InstantiatorConfig()
        self.source = RandomSource(self.config.seed)
        self.registry = registry or GeneratorRegistry.from_config(self.config, self.source)

    def create_instance(self, type_: Any) -> Any:
        return self._resolve(describe(type_), depth=0)

    def _factory_for(self, descriptor: TypeDescriptor) -> Optional[InstanceFactory]:
        for key in descriptor.lookup_keys():
            factory = self.registry.lookup(key)
            if factory is not None:
                return factory
        return None

    def _resolve(self, descriptor: TypeDescriptor, depth: int) -> Any:
        if depth > self.config.max_depth:
            raise RecursionLimitExceeded(
                f"Exceeded maximum nesting depth of {self.config.max_depth} while constructing {descriptor.name}; "
                f"is the type self-referential?",
                descriptor.key,
            )

        factory = self._factory_for(descriptor)
        if factory is not None:
            log.debug("Using registered generator for %s", descriptor.name)
            return factory()

        if descriptor.kind == TypeKind.SINGLETON:
            log.debug("Returning shared instance of %s", descriptor.name)
            return descriptor.singleton_instance()

        if descriptor.kind == TypeKind.ENUMERATED:
            variants = descriptor.variants()
            if not variants:
                raise UnresolvedTypeError(f"Enum {descriptor.name} declares no members", descriptor.key)
            chosen = self.source.choice(variants)
            log.debug("Picked %s from %d variants of %s", chosen, len(variants), descriptor.name)
            return chosen

        if descriptor.kind == TypeKind.COMPOSITE:
            return self._construct(descriptor, depth)

        if descriptor.kind == TypeKind.PRIMITIVE:
            raise UnresolvedTypeError(f"No generator registered for elementary type {descriptor.name}", descriptor.key)

        raise UnresolvedTypeError(
            f"Could not construct instance of {descriptor.name}: register a generator for it",
            descriptor.key,
        )

    def _construct(self, descriptor: TypeDescriptor, depth: int) -> Any:
        parameters = descriptor.constructor_parameters()
        if not parameters:
            log.debug("Constructing %s with no arguments", descriptor.name)
            return descriptor.target()

        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        for parameter in parameters:
            value = self._resolve(parameter.descriptor, depth + 1)
            if parameter.positional_only:
                args.append(value)
            else:
                kwargs[parameter.name] = value

        log.debug("Constructing %s with %d arguments", descriptor.name, len(parameters))
        return descriptor.target(*args, **kwargs)


def instance(cls: Type[T], config: Optional[InstantiatorConfig] = None) -> T:
    """Return one freshly constructed instance of ``cls``.

    Example:
        >>> config = InstantiatorConfig(int_generator=lambda: 42)
        >>> instance(Point, config)
        Point(x=42, y=42)
    """
    return Instantiator(config).create_instance(cls)
