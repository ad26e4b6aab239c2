"""Shared (de)serialization behaviour for resource-manager wire models.

Every model converts between its typed Python form and the JSON object the
service exchanges. Three things matter on the wire and are preserved here:

``FieldState``
    Whether a property was absent, present as ``null`` or present with a
    value. pydantic's ``model_fields_set`` records presence, so ``to_wire``
    only writes properties that were supplied.

``Extensible``
    Enumerated strings are matched case-insensitively against a closed
    :class:`enum.Enum`; values the client does not know are kept as
    :class:`Unrecognized` instead of failing.

``WireDateTime``
    ISO-8601 timestamps, accepting the seven fractional digits some services
    emit.

A string read from the wire and parsed into another type (an enum member, a
datetime, a boolean) is written back exactly as it was received for as long
as the parsed value is left unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    ModelWrapValidatorHandler,
    PlainSerializer,
    PlainValidator,
    PrivateAttr,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from ..errors import DeserializationError, ValidationError

EnumType = TypeVar("EnumType", bound=Enum)

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


class FieldState(Enum):
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


class Unrecognized(str):
    """An enumerated wire value with no matching member."""

    def __repr__(self) -> str:
        return f"Unrecognized({str.__repr__(self)})"


def parse_enum(enum_cls: type[EnumType], value: Any) -> EnumType | Unrecognized:
    """Return the member of ``enum_cls`` matching ``value`` or :class:`Unrecognized`."""

    if isinstance(value, (enum_cls, Unrecognized)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a string for {enum_cls.__name__}, got {type(value).__name__}")
    folded = value.casefold()
    for member in enum_cls:
        if str(member.value).casefold() == folded:
            return member
    return Unrecognized(value)


def _enum_to_wire(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class Extensible:
    """``Extensible[SomeEnum]`` annotates a field holding ``SomeEnum | Unrecognized``."""

    def __class_getitem__(cls, enum_cls: type[Enum]) -> Any:
        return Annotated[
            Any,
            PlainValidator(lambda value: parse_enum(enum_cls, value)),
            PlainSerializer(_enum_to_wire, return_type=str),
        ]


def _trim_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _EXCESS_FRACTION.sub(r"\1", value)
    return value


WireDateTime = Annotated[datetime, BeforeValidator(_trim_fraction)]


def _is_wire_literal(value: Any) -> bool:
    if isinstance(value, list):
        return all(isinstance(item, str) for item in value)
    return isinstance(value, str)


def _is_plain_text(value: Any) -> bool:
    if isinstance(value, list):
        return all(type(item) is str for item in value)
    return type(value) is str


class ResourceModel(BaseModel):
    """Base class for models exchanged with resource-manager endpoints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ()

    _wire_literals: dict[str, tuple[Any, Any]] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_wire_literals(cls, data: Any, handler: ModelWrapValidatorHandler[Any]) -> Any:
        model = handler(data)
        if not isinstance(data, Mapping):
            return model
        for name, field in cls.model_fields.items():
            raw = data.get(field.alias or name, data.get(name))
            if not _is_wire_literal(raw):
                continue
            value = getattr(model, name)
            if value == raw and _is_plain_text(value):
                continue
            model._wire_literals[name] = (raw, list(value) if isinstance(value, list) else value)
        return model

    @model_serializer(mode="wrap")
    def _restore_wire_literals(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        data = handler(self)
        if not info.mode_is_json() or not isinstance(data, dict):
            return data
        fields = type(self).model_fields
        for name, (raw, parsed) in self._wire_literals.items():
            key = (fields[name].alias or name) if info.by_alias else name
            if key in data and getattr(self, name) == parsed:
                data[key] = raw
        return data

    @classmethod
    def from_wire(cls, data: Any) -> Any:
        """Build a model from a decoded JSON object.

        Unknown properties are ignored. A property whose value cannot be
        parsed fails the whole model with :class:`DeserializationError`.
        """

        if not isinstance(data, Mapping):
            raise DeserializationError(cls.__name__, f"expected a JSON object, got {type(data).__name__}")
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise DeserializationError(cls.__name__, str(exc)) from exc

    @classmethod
    def deserialize(cls, data: Any) -> Any:
        return cls.from_wire(data)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON object for this model, limited to defined properties."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def serialize(self) -> dict[str, Any]:
        return self.to_wire()

    def field_state(self, name: str) -> FieldState:
        if name not in type(self).model_fields:
            raise KeyError(f"{type(self).__name__} has no field '{name}'")
        if name not in self.model_fields_set:
            return FieldState.ABSENT
        if getattr(self, name) is None:
            return FieldState.NULL
        return FieldState.VALUE

    def is_defined(self, name: str) -> bool:
        return self.field_state(name) is FieldState.VALUE

    def validate_required(self) -> None:
        """Raise :class:`ValidationError` for the first missing required field."""

        for name in self.required_fields:
            value = getattr(self, name)
            if value is None or value == "":
                raise ValidationError(name)
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, ResourceModel):
                value.validate_required()
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, ResourceModel):
                        item.validate_required()


__all__ = [
    "Extensible",
    "FieldState",
    "ResourceModel",
    "Unrecognized",
    "WireDateTime",
    "parse_enum",
]
