"""Backend interface records to API interface descriptors."""

import logging

from ism_transform.deriver.mapper import map_fields, text_value
from ism_transform.deriver.reconciler import reconcile
from ism_transform.deriver.rules import infer_endpoint, infer_method
from ism_transform.deriver.synthesizer import synthesize_fields
from ism_transform.models import APIInterface, TransformOptions

logger = logging.getLogger(__name__)


def derive_interfaces(ism: dict, options: TransformOptions | None = None) -> list[APIInterface]:
    """Derive one APIInterface per record in ``ism["interfaces"]``."""
    records = ism.get("interfaces") if isinstance(ism, dict) else None
    if not isinstance(records, list):
        logger.warning("ISM has no interface list, nothing to derive")
        return []

    interfaces = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.debug("Skipping non-object interface record at %d", index)
            continue
        interfaces.append(derive_interface(record, index, options))
    return interfaces


def derive_interface(record: dict, index: int, options: TransformOptions | None = None) -> APIInterface:
    """Build the APIInterface for a single backend record.

    ``index`` is the record's position in the payload; it names records
    that carry no id or name and picks the fallback source section.
    """
    type_tag = text_value(record.get("type"))
    name = text_value(record.get("name"))
    record_id = text_value(record.get("id"))

    fields = reconcile(
        map_fields(record.get("fields") if isinstance(record.get("fields"), list) else []),
        synthesize_fields(record, options),
    )

    return APIInterface(
        id=f"api-{record_id or index}",
        name=name or f"接口{index + 1}",
        method=infer_method(type_tag, name),
        endpoint=infer_endpoint(type_tag, name),
        source_section=source_section_for(record, index),
        request_fields=fields.request_fields,
        response_fields=fields.response_fields,
    )


def source_section_for(record: dict, index: int) -> str:
    chunk_ids = record.get("source_chunk_ids")
    if isinstance(chunk_ids, list) and chunk_ids and text_value(chunk_ids[0]):
        return f"section-chunk-{text_value(chunk_ids[0])}"
    return f"section-{index + 1}"
