"""Merging of mapped and synthesized fields."""

from ism_transform.models import FieldSet, NormalizedField


def reconcile(mapped: FieldSet, synthesized: FieldSet) -> FieldSet:
    """Concatenate mapped before synthesized fields and drop repeats.

    Two fields are the same when name and expression match; the first one
    seen is kept, so backend-declared fields win over synthesized ones.
    """
    return FieldSet(
        request_fields=dedupe(mapped.request_fields + synthesized.request_fields),
        response_fields=dedupe(mapped.response_fields + synthesized.response_fields),
    )


def dedupe(fields: list[NormalizedField]) -> list:
    seen: set[tuple[str, str]] = set()
    result = []
    for field in fields:
        key = (field.name, field.expression)
        if key in seen:
            continue
        seen.add(key)
        result.append(field)
    return result
