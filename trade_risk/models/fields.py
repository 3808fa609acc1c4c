"""Helpers for rebuilding models from stored documents."""

from typing import Any, Mapping, Sequence

from trade_risk.errors import ValidationError


def require_field(data: Mapping[str, Any], key: str, entity: str) -> Any:
    """Fetch a mandatory document field."""
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"{entity} document must be a mapping, got {type(data).__name__}",
            field=entity,
            value=data,
        )
    if key not in data:
        raise ValidationError(
            f"{entity} document is missing '{key}'",
            field=key,
        )
    return data[key]


def parse_enum(enum_cls: Any, value: Any, field: str) -> Any:
    """Convert a stored string to its enum member."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"{field} must be one of {allowed}, got {value!r}",
            field=field,
            value=value,
        ) from None


def require_sequence(value: Any, field: str) -> tuple:
    """Convert a stored list to a tuple; strings and mappings are rejected."""
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise ValidationError(
            f"{field} must be a list, got {type(value).__name__}",
            field=field,
            value=value,
        )
    return tuple(value)
