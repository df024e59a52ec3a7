import inspect
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Tuple

from .errors import UnsupportedConstructionError
from .primitives import PRIMITIVE_TYPES


class TypeKind(str, Enum):
    PRIMITIVE = "primitive"
    SINGLETON = "singleton"
    ENUMERATED = "enumerated"
    COMPOSITE = "composite"
    UNSUPPORTED = "unsupported"


_BUILTIN_SINGLETONS: Dict[type, Any] = {
    type(None): None,
    type(Ellipsis): Ellipsis,
    type(NotImplemented): NotImplemented,
}

_UNION_ORIGINS = (typing.Union, types.UnionType)


def type_name(annotation: Any) -> str:
    """Human readable name of an annotation for error messages and logs."""
    if isinstance(annotation, str):
        return repr(annotation)
    name = getattr(annotation, "__qualname__", None) or getattr(annotation, "__name__", None)
    if isinstance(name, str) and inspect.isclass(annotation):
        module = getattr(annotation, "__module__", None)
        if module and module != "builtins":
            return f"{module}.{name}"
    return name if isinstance(name, str) else repr(annotation)


class ConstructorParameter(NamedTuple):
    name: str
    descriptor: "TypeDescriptor"
    positional_only: bool = False


@dataclass(frozen=True)
class TypeDescriptor:
    """Read-only view of a type's shape, as far as construction is concerned.

    ``key`` is the annotation as written. ``aliases`` holds every annotation
    peeled off on the way to ``target`` (``Optional``, ``Annotated`` and
    ``NewType`` wrappers), in the order they are tried against the registry.
    """

    key: Any
    target: Any
    kind: TypeKind
    aliases: Tuple[Any, ...] = ()

    @property
    def name(self) -> str:
        return type_name(self.key)

    def lookup_keys(self) -> Tuple[Any, ...]:
        return self.aliases + (self.target,)

    def is_primitive(self) -> bool:
        return self.kind == TypeKind.PRIMITIVE

    def is_singleton(self) -> bool:
        return self.kind == TypeKind.SINGLETON

    def is_enumerated(self) -> bool:
        return self.kind == TypeKind.ENUMERATED

    def is_composite(self) -> bool:
        return self.kind == TypeKind.COMPOSITE

    def variants(self) -> List[Any]:
        if not self.is_enumerated():
            return []
        return list(self.target)

    def singleton_instance(self) -> Any:
        if self.target in _BUILTIN_SINGLETONS:
            return _BUILTIN_SINGLETONS[self.target]
        shared = getattr(self.target, "_instance", None)
        if shared is None:
            # cached-instance classes populate _instance on first call
            try:
                shared = self.target()
            except TypeError as e:
                raise UnsupportedConstructionError(
                    f"Can not obtain the shared instance of {self.name}: {e}",
                    self.key,
                ) from e
        if not isinstance(shared, self.target):
            raise UnsupportedConstructionError(
                f"Shared instance of {self.name} is a {type(shared).__name__}, not a {self.name}",
                self.key,
            )
        return shared

    def constructor_parameters(self) -> List[ConstructorParameter]:
        """Constructor parameters in declaration order.

        Raises UnsupportedConstructionError when the constructor cannot be
        introspected or a parameter carries no annotation.
        """
        if not self.is_composite():
            return []
        try:
            signature = inspect.signature(self.target)
        except (TypeError, ValueError) as e:
            raise UnsupportedConstructionError(
                f"Can not instantiate an instance of {self.name} without an introspectable constructor: {e}",
                self.key,
            ) from e

        hints = _constructor_hints(self.target)
        parameters = []
        for parameter in signature.parameters.values():
            if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            annotation = parameter.annotation
            if annotation is inspect.Parameter.empty:
                raise UnsupportedConstructionError(
                    f"Can not instantiate an instance of {self.name}: "
                    f"constructor parameter '{parameter.name}' has no type annotation",
                    self.key,
                )
            if _has_forward_reference(annotation):
                annotation = hints.get(parameter.name, annotation)
            parameters.append(ConstructorParameter(
                name=parameter.name,
                descriptor=describe(annotation),
                positional_only=parameter.kind == inspect.Parameter.POSITIONAL_ONLY,
            ))
        return parameters

    def instance(self, config=None) -> Any:
        """Build one instance of the described type."""
        from .instantiator import Instantiator

        return Instantiator(config).create_instance(self)

    def __str__(self) -> str:
        return self.name


def _constructor_hints(cls: type) -> Dict[str, Any]:
    hints: Dict[str, Any] = {}
    for owner in (cls, getattr(cls, "__init__", None)):
        if owner is None:
            continue
        try:
            hints.update(typing.get_type_hints(owner, include_extras=True))
        except (NameError, TypeError, AttributeError):
            # unresolvable forward references stay as strings
            continue
    return hints


def _has_forward_reference(annotation: Any) -> bool:
    if isinstance(annotation, (str, typing.ForwardRef)):
        return True
    return any(_has_forward_reference(arg) for arg in typing.get_args(annotation))


def _unwrap(annotation: Any) -> Tuple[Any, Tuple[Any, ...]]:
    """Peel Annotated, Optional and NewType wrappers off an annotation."""
    aliases: List[Any] = []
    current = type(None) if annotation is None else annotation
    while current not in PRIMITIVE_TYPES:
        origin = typing.get_origin(current)
        if origin is typing.Annotated:
            nxt = typing.get_args(current)[0]
        elif origin in _UNION_ORIGINS:
            members = [arg for arg in typing.get_args(current) if arg is not type(None)]
            if len(members) != 1:
                break
            nxt = members[0]
        elif hasattr(current, "__supertype__"):
            nxt = current.__supertype__
        else:
            break
        aliases.append(current)
        current = nxt
    return current, tuple(aliases)


def _has_cached_instance(cls: type) -> bool:
    """True for classes caching their one instance in an ``_instance`` attribute."""
    shared = getattr(cls, "_instance", NotImplemented)
    return shared is None or isinstance(shared, cls)


def _classify(target: Any) -> TypeKind:
    if target in PRIMITIVE_TYPES:
        return TypeKind.PRIMITIVE
    if target is Any or typing.get_origin(target) is not None or not inspect.isclass(target):
        return TypeKind.UNSUPPORTED
    if target in _BUILTIN_SINGLETONS or _has_cached_instance(target):
        return TypeKind.SINGLETON
    if issubclass(target, Enum):
        return TypeKind.ENUMERATED
    if inspect.isabstract(target) or getattr(target, "_is_protocol", False):
        return TypeKind.UNSUPPORTED
    return TypeKind.COMPOSITE


def describe(annotation: Any) -> TypeDescriptor:
    """Build the descriptor for a class or annotation."""
    if isinstance(annotation, TypeDescriptor):
        return annotation
    target, aliases = _unwrap(annotation)
    return TypeDescriptor(key=annotation, target=target, kind=_classify(target), aliases=aliases)
