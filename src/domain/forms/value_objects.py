"""Value objects for the Forms bounded context.

A ``Form`` is an immutable snapshot: a name plus an ordered tuple of ``Field``
records. Operations never mutate a snapshot, they build a new one with
``dataclasses.replace``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from src.domain.errors import InvalidFieldTypeError

ValidationRule = Callable[[Any], Optional[str]]
ConditionalRule = Callable[[Mapping[str, Any]], bool]


class FieldType(Enum):
    """Kinds of input a field accepts."""

    TEXT = "text"
    BOOLEAN = "boolean"
    SELECT = "select"

    @classmethod
    def parse(cls, value: Union["FieldType", str]) -> "FieldType":
        """Accept either a member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidFieldTypeError(str(value)) from None


@dataclass(frozen=True)
class Field:
    """
    One named, typed input slot.

    ``value``, ``options`` and ``default_visibility`` stay ``None`` until a
    setter provides them. ``errors`` and ``visible`` are derived by the
    validation and visibility passes and are ``None`` on snapshots that have
    not been through those passes.

    ``type`` is ``None`` only for records created by a write addressed to a
    name the form did not contain.
    """

    name: str
    type: Optional[FieldType]
    value: Any = None
    options: Optional[Tuple[str, ...]] = None
    default_visibility: Optional[bool] = None
    validation_rules: Tuple[ValidationRule, ...] = ()
    conditional_rules: Tuple[ConditionalRule, ...] = ()
    errors: Optional[Tuple[str, ...]] = None
    visible: Optional[bool] = None

    @property
    def is_shown(self) -> bool:
        """Effective visibility for renderers."""
        if self.visible is not None:
            return self.visible
        return self.default_visibility is not False

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of the attributes that were set. Rules are not exported."""
        data: Dict[str, Any] = {}
        if self.type is not None:
            data["type"] = self.type.value
        data["name"] = self.name
        if self.value is not None:
            data["value"] = self.value
        if self.options is not None:
            data["options"] = list(self.options)
        if self.default_visibility is not None:
            data["defaultVisibility"] = self.default_visibility
        if self.errors is not None:
            data["errors"] = list(self.errors)
        if self.visible is not None:
            data["visible"] = self.visible
        return data


@dataclass(frozen=True)
class Form:
    """Top-level immutable value holding a name and ordered fields."""

    name: str = ""
    fields: Tuple[Field, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Callers may hand in a list; store a tuple so the snapshot stays immutable
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot shape handed to persistence at design time."""
        return {
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
        }
