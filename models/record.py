"""
Helpers over plain record dicts as returned by the backend.

Nested groups (contactInfo, insuranceDetails) are addressed with
"parent.child" paths. All functions return new dicts; inputs are not mutated.
"""

import re
from datetime import date

from models.entity import DATE, EMAIL, EntityDescriptor, FieldSpec, Column

DISPLAY_DATE_FORMAT = "%b %d, %Y"

# Same shape browsers accept for <input type="email">: local@domain, no spaces
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@.]+(\.[^\s@.]+)*$")


def get_value(record, path: str, default=""):
    current = record
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def set_value(record: dict, path: str, value) -> dict:
    """Return a copy of `record` with one field changed.

    For a nested path only that one key of the parent group is replaced;
    sibling keys keep their current values.
    """
    parent, _, child = path.partition(".")
    updated = dict(record or {})
    if not child:
        updated[parent] = value
        return updated

    group = updated.get(parent)
    group = dict(group) if isinstance(group, dict) else {}
    group[child] = value
    updated[parent] = group
    return updated


def is_empty(value) -> bool:
    return value is None or value == ""


def missing_required(descriptor: EntityDescriptor, record: dict) -> list[FieldSpec]:
    return [f for f in descriptor.fields if f.required and is_empty(get_value(record, f.path))]


def invalid_emails(descriptor: EntityDescriptor, record: dict) -> list[FieldSpec]:
    """Filled email fields whose value is not an address. Empty ones are left to missing_required."""
    return [
        f for f in descriptor.fields
        if f.kind == EMAIL
        and not is_empty(get_value(record, f.path))
        and not EMAIL_PATTERN.match(str(get_value(record, f.path)).strip())
    ]


def record_id(descriptor: EntityDescriptor, record) -> str | None:
    value = get_value(record, descriptor.id_field)
    return None if is_empty(value) else str(value)


def is_usable(record) -> bool:
    """A fetched record is usable when it is a non-empty object."""
    return isinstance(record, dict) and bool(record)


def create_payload(descriptor: EntityDescriptor, record: dict) -> dict:
    payload = dict(record)
    payload.pop(descriptor.id_field, None)
    return payload


def parse_date(value) -> date | None:
    """Parse 'YYYY-MM-DD' or a full ISO timestamp; None when not a date."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def display_value(field: FieldSpec, record) -> str:
    value = get_value(record, field.path)
    if is_empty(value):
        return field.fallback
    if field.kind == DATE:
        parsed = parse_date(value)
        return parsed.strftime(DISPLAY_DATE_FORMAT) if parsed else str(value)
    return str(value)


def cell_value(column: Column, record) -> str:
    value = get_value(record, column.path)
    if is_empty(value):
        return ""
    return f"{value}{column.suffix}"
