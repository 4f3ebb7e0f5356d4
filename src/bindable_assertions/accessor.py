"""Resolution of property selectors into accessors.

A selector names the single property a verification works on. Three shapes
are accepted:

- the property name, ``"value"``
- the property object, ``Bindable.value``
- a ``PropertyAccessor`` built by the caller from a getter, a setter and a name
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from bindable_assertions.errors import InvalidArgumentError

_SHAPE_HINT = (
    "must be a simple property reference of the form 'value', "
    "Bindable.value or PropertyAccessor(name, getter, setter)"
)


@dataclass(frozen=True)
class PropertyAccessor:
    """Reads and writes one named property."""

    name: str
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]

    def get(self, instance: Any) -> Any:
        """Read the property from ``instance``."""
        return self.getter(instance)

    def set(self, instance: Any, value: Any) -> None:
        """Write ``value`` to the property on ``instance``."""
        self.setter(instance, value)

    @classmethod
    def for_attribute(cls, name: str) -> "PropertyAccessor":
        """Build an accessor that goes through ``getattr``/``setattr``."""

        def getter(instance: Any) -> Any:
            return getattr(instance, name)

        def setter(instance: Any, value: Any) -> None:
            setattr(instance, name, value)

        return cls(name, getter, setter)


PropertySelector = str | property | PropertyAccessor


def _is_data_descriptor(obj: Any) -> bool:
    return hasattr(type(obj), "__get__") and hasattr(type(obj), "__set__")


def _find_descriptor(owner_type: type, name: str) -> Any | None:
    for klass in inspect.getmro(owner_type):
        if name in vars(klass):
            return vars(klass)[name]
    return None


def _find_descriptor_name(owner_type: type, descriptor: Any) -> str | None:
    for klass in inspect.getmro(owner_type):
        for name, value in vars(klass).items():
            if value is descriptor:
                return name
    return None


def _validate_accessor(accessor: PropertyAccessor, parameter_name: str) -> None:
    if not isinstance(accessor.name, str) or not accessor.name.isidentifier():
        msg = f"{parameter_name} must name a property, got {accessor.name!r}"
        raise InvalidArgumentError(msg, parameter_name)
    if not callable(accessor.getter) or not callable(accessor.setter):
        msg = f"{parameter_name} must provide a callable getter and setter"
        raise InvalidArgumentError(msg, parameter_name)


def resolve_property_accessor(
    owner_type: type,
    selector: Any,
    parameter_name: str = "property_selector",
) -> PropertyAccessor:
    """Resolve ``selector`` to an accessor for a property of ``owner_type``.

    Parameters
    ----------
    owner_type : type
        Type the property must be declared on
    selector : str | property | PropertyAccessor
        Property reference
    parameter_name : str
        Name reported in error messages

    Returns
    -------
    PropertyAccessor
        Accessor for the selected property

    Raises
    ------
    InvalidArgumentError
        If the selector is None, has the wrong shape, or does not name a
        writable property of ``owner_type``
    """
    if selector is None:
        msg = f"{parameter_name} must not be None"
        raise InvalidArgumentError(msg, parameter_name)

    if isinstance(selector, PropertyAccessor):
        _validate_accessor(selector, parameter_name)
        return selector

    if isinstance(selector, str):
        if not selector.isidentifier():
            msg = f"{parameter_name} {_SHAPE_HINT}, got {selector!r}"
            raise InvalidArgumentError(msg, parameter_name)
        name = selector
        descriptor = _find_descriptor(owner_type, name)
    elif _is_data_descriptor(selector):
        descriptor = selector
        name = _find_descriptor_name(owner_type, selector)
        if name is None:
            msg = (
                f"could not find the given property on instance of type "
                f"{owner_type.__module__}.{owner_type.__qualname__}"
            )
            raise InvalidArgumentError(msg, parameter_name)
    else:
        msg = f"{parameter_name} {_SHAPE_HINT}, got {selector!r}"
        raise InvalidArgumentError(msg, parameter_name)

    if descriptor is None or not _is_data_descriptor(descriptor):
        msg = (
            f"could not find property with name {name} on instance of type "
            f"{owner_type.__module__}.{owner_type.__qualname__}"
        )
        raise InvalidArgumentError(msg, parameter_name)

    if isinstance(descriptor, property) and descriptor.fset is None:
        msg = (
            f"property {name} on type {owner_type.__qualname__} is read-only "
            f"and cannot be verified"
        )
        raise InvalidArgumentError(msg, parameter_name)

    return PropertyAccessor.for_attribute(name)
