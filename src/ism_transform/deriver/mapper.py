"""Flat backend field list to normalized request/response fields."""

import logging

from ism_transform.deriver.expression import classify_expression
from ism_transform.deriver.types import normalize_type
from ism_transform.models import FieldSet, RequestField, ResponseField, Role

logger = logging.getLogger(__name__)


def map_fields(flat_fields: list[dict] | None) -> FieldSet:
    """Convert backend ``fields`` records into request and response fields.

    Each field gets an id hashed from its name and expression, so deriving
    the same record twice yields the same ids. Expressions that classify as
    neither side land in the request list.
    """
    result = FieldSet()
    issued: set[str] = set()

    for position, raw in enumerate(flat_fields or []):
        if not isinstance(raw, dict):
            logger.debug("Skipping non-object field entry at %d: %r", position, raw)
            continue

        name = text_value(raw.get("name"))
        expression = text_value(raw.get("expression"))
        description = text_value(raw.get("description")) or None

        field_id = field_id_for(name, expression)
        if field_id in issued:
            field_id = f"{field_id}-{position}"
        issued.add(field_id)

        common = dict(
            id=field_id,
            name=name,
            expression=expression,
            required=bool(raw.get("required", False)),
            type=normalize_type(raw.get("data_type") or raw.get("type")),
        )

        if classify_expression(expression) is Role.RESPONSE:
            result.response_fields.append(ResponseField(**common, description=description or ""))
        else:
            result.request_fields.append(RequestField(**common, description=description))

    return result


def field_id_for(name: str, expression: str) -> str:
    """Stable synthetic id for a field, e.g. ``field-1a2b3c4d``."""
    return f"field-{string_hash(f'{name}|{expression}'):08x}"


def string_hash(value: str) -> int:
    """Unsigned 32-bit polynomial hash; identical across runs and processes."""
    h = 0
    for char in value:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    return h


def text_value(value) -> str:
    """Coerce an optional scalar from the payload to a stripped string."""
    if value is None:
        return ""
    return str(value).strip()
