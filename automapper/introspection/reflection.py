"""
Reflection Facility - enumerates, reads and writes members of Python objects

Supports:
- Dataclasses, annotated classes, plain class attributes, properties, __slots__
- Instance attributes discovered on live objects
- Protected (_x) and name-mangled private (__x) members
- Mapping sources/destinations (dicts), treated like dynamic objects
- Construction with or without running __init__
- Declared member types (Optional[X], List[X], Tuple[X, ...]) for nesting
"""

import dataclasses
import inspect
import logging
import types
import typing
from collections.abc import Mapping, MutableMapping, Sequence
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from automapper.exceptions import UnsupportedConstruction

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for a member that does not exist on a source"""

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNSET"


UNSET = _Unset()

_UNION_TYPES = tuple(
    t for t in (typing.Union, getattr(types, "UnionType", None)) if t is not None
)
_SEQUENCE_ORIGINS = (list, tuple, Sequence)


def _is_private(name: str) -> bool:
    return name.startswith("__") and not name.endswith("__")


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _mangle(klass: type, name: str) -> str:
    return f"_{klass.__name__.lstrip('_')}{name}"


def _demangle(attribute: str, mro: Tuple[type, ...]) -> str:
    """Turn _Owner__x back into __x when Owner is in the MRO"""
    for klass in mro:
        prefix = f"_{klass.__name__.lstrip('_')}__"
        if attribute.startswith(prefix) and len(attribute) > len(prefix):
            return attribute[len(prefix) - 2:]
    return attribute


def _own_annotations(klass: type) -> Dict[str, Any]:
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        return dict(klass.__dict__.get("__annotations__", {}))


def _is_classvar(annotation: Any) -> bool:
    if annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar:
        return True
    return isinstance(annotation, str) and annotation.startswith(("ClassVar", "typing.ClassVar"))


def _own_slots(klass: type) -> List[str]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [slot for slot in slots if slot not in ("__dict__", "__weakref__")]


def _init_parameters(cls: type) -> List[str]:
    """Named parameters of a user-defined __init__, without self"""
    init = cls.__init__
    if init is object.__init__ or not inspect.isfunction(init):
        return []

    try:
        parameters = list(inspect.signature(init).parameters.values())[1:]
    except (TypeError, ValueError):
        return []

    return [
        parameter.name
        for parameter in parameters
        if parameter.kind not in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD)
    ]


@lru_cache(maxsize=None)
def _class_members(cls: type) -> Tuple[str, ...]:
    """Attribute names declared on cls and its bases, base classes first"""
    attributes: Dict[str, None] = {}

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue

        class_variables = set()
        for attribute, annotation in _own_annotations(klass).items():
            if _is_classvar(annotation):
                class_variables.add(attribute)
            else:
                attributes[attribute] = None

        for attribute in _own_slots(klass):
            attributes[attribute] = None

        for attribute, value in vars(klass).items():
            if _is_dunder(attribute) or attribute.startswith("_abc_") or attribute in class_variables:
                continue
            if isinstance(value, property):
                attributes[attribute] = None
            elif not isinstance(value, (staticmethod, classmethod)) and not callable(value):
                attributes[attribute] = None

    # Members assigned only inside __init__ are known by its parameters
    for attribute in _init_parameters(cls):
        attributes.setdefault(attribute, None)

    members: Dict[str, None] = {}
    for attribute in attributes:
        members[_demangle(attribute, cls.__mro__)] = None
    return tuple(members)


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except Exception as e:
        logger.debug(f"Could not resolve type hints for {cls.__qualname__}: {e}")
        hints: Dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            if klass is not object:
                hints.update(_own_annotations(klass))
        return hints


class ReflectionFacility:
    """Reads and writes object members regardless of naming-based visibility"""

    def list_members(self, target: Any) -> List[str]:
        """
        List member names of a class or an instance

        Args:
            target: A class, an instance, or a Mapping

        Returns:
            Member names in a stable order (declared members first, then
            instance attributes). Private members are reported as __name.
        """
        if isinstance(target, Mapping):
            return [key for key in target if isinstance(key, str)]

        cls = target if isinstance(target, type) else type(target)
        members = dict.fromkeys(_class_members(cls))

        if not isinstance(target, type):
            for attribute in getattr(target, "__dict__", {}):
                if not _is_dunder(attribute):
                    members[_demangle(attribute, cls.__mro__)] = None

        return list(members)

    def read_member(self, instance: Any, name: str) -> Any:
        """Read a member value, or UNSET when the member does not exist"""
        if isinstance(instance, Mapping):
            return instance.get(name, UNSET)

        if _is_private(name):
            for klass in type(instance).__mro__:
                value = self._lookup(instance, _mangle(klass, name))
                if value is not UNSET:
                    return value

        return self._lookup(instance, name)

    def write_member(self, instance: Any, name: str, value: Any) -> None:
        """
        Write a member value, bypassing __setattr__ overrides

        Raises:
            AttributeError: If the member cannot be written (read-only property)
        """
        if isinstance(instance, MutableMapping):
            instance[name] = value
            return

        object.__setattr__(instance, self._storage_name(type(instance), name), value)

    def construct(self, cls: type, skip_constructor: bool = False) -> Any:
        """
        Create an instance of cls

        Args:
            cls: Type to instantiate
            skip_constructor: Allocate the instance without running __init__.
                Dataclass field defaults are still applied.

        Raises:
            UnsupportedConstruction: If the instance cannot be allocated
        """
        if not skip_constructor:
            return cls()

        try:
            instance = cls.__new__(cls)
        except TypeError as e:
            raise UnsupportedConstruction(cls, str(e)) from e

        if dataclasses.is_dataclass(cls):
            for f in dataclasses.fields(cls):
                if f.default is not dataclasses.MISSING:
                    object.__setattr__(instance, f.name, f.default)
                elif f.default_factory is not dataclasses.MISSING:
                    object.__setattr__(instance, f.name, f.default_factory())

        return instance

    def requires_arguments(self, cls: type) -> bool:
        """Whether cls() cannot be called without arguments"""
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            return False

        for parameter in signature.parameters.values():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            if parameter.default is parameter.empty:
                return True
        return False

    def member_type(self, cls: type, name: str) -> Tuple[Optional[type], bool]:
        """
        Declared type of a member

        Returns:
            Tuple of (class or None, is_sequence). List[X] gives (X, True),
            Optional[X] gives (X, False), unknown or non-class hints give None.
        """
        if not isinstance(cls, type):
            return None, False

        hint = _type_hints(cls).get(self._storage_name(cls, name))
        return self._unwrap(hint)

    def _unwrap(self, hint: Any) -> Tuple[Optional[type], bool]:
        # typing.Any is a class on 3.11+ but cannot be used with isinstance
        if hint is None or hint is Any:
            return None, False

        origin = typing.get_origin(hint)
        args = typing.get_args(hint)

        if origin in _UNION_TYPES:
            candidates = [arg for arg in args if arg is not type(None)]
            if len(candidates) == 1:
                return self._unwrap(candidates[0])
            return None, False

        if origin in _SEQUENCE_ORIGINS:
            item = args[0] if args else None
            if isinstance(item, type) and item is not Any:
                return item, True
            return None, True

        if isinstance(hint, type) and origin is None:
            return hint, False

        return None, False

    def _storage_name(self, cls: type, name: str) -> str:
        """Attribute name a member is stored under (mangled for __private)"""
        if not _is_private(name):
            return name

        for klass in cls.__mro__:
            mangled = _mangle(klass, name)
            if (
                mangled in _own_annotations(klass)
                or mangled in klass.__dict__
                or mangled in _own_slots(klass)
            ):
                return mangled
        return _mangle(cls, name)

    @staticmethod
    def _lookup(instance: Any, attribute: str) -> Any:
        """Attribute value, or UNSET when missing or a method of the class"""
        if attribute not in getattr(instance, "__dict__", {}):
            declared = inspect.getattr_static(type(instance), attribute, None)
            if isinstance(declared, (staticmethod, classmethod)) or inspect.isroutine(declared):
                return UNSET

        try:
            return getattr(instance, attribute)
        except AttributeError:
            return UNSET
