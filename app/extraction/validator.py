"""Checks extracted field maps against their category schema."""

from app.extraction.exceptions import FieldMapValidationError
from app.extraction.models import FieldMap, FieldSchema, FieldValue, ValueKind

_NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.DECIMAL})


def validate_field_map(schema: FieldSchema, values: FieldMap) -> FieldMap:
    """Return ``values`` unchanged if every key and value fits ``schema``.

    Raises:
        FieldMapValidationError: on an unknown key or an out-of-set value.
    """
    allowed_keys = set(schema.keys)
    for key, value in values.items():
        if key not in allowed_keys:
            raise FieldMapValidationError(
                f"Field '{key}' is not part of the {schema.name} schema"
            )
        definitions = schema.definitions_for(key)
        if not any(_fits(d.kind, d.allowed_values, value) for d in definitions):
            raise FieldMapValidationError(
                f"Field '{key}' has invalid value {value!r} for the {schema.name} schema"
            )
    return values


def _fits(
    kind: ValueKind,
    allowed: frozenset[FieldValue] | None,
    value: FieldValue,
) -> bool:
    if isinstance(value, bool):
        return False
    if kind in _NUMERIC_KINDS:
        if kind is ValueKind.INTEGER:
            return isinstance(value, int)
        return isinstance(value, (int, float))
    if kind is ValueKind.PRESSURE:
        return isinstance(value, str)
    return allowed is not None and value in allowed
