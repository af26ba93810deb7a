"""Full transformation pass: backend response -> interfaces + outline."""

import logging

from ism_transform.deriver.interface import derive_interfaces
from ism_transform.models import TransformOptions, TransformResult
from ism_transform.outline.sections import build_sections
from ism_transform.payload.validator import (
    InvalidPayloadError,
    extract_backend_data,
    is_valid_backend_payload,
    payload_error_message,
)

logger = logging.getLogger(__name__)


def transform_payload(response: dict, options: TransformOptions | None = None) -> TransformResult:
    """Validate a workflow response and derive its interfaces and sections.

    Raises InvalidPayloadError when the response carries a backend error or
    lacks the minimal ISM shape; nothing is derived in that case.
    """
    options = options or TransformOptions()

    if isinstance(response, dict) and response.get("__error__"):
        raise InvalidPayloadError(payload_error_message(response))

    data = extract_backend_data(response)
    if data is None:
        raise InvalidPayloadError(payload_error_message(response))
    if not is_valid_backend_payload(data):
        raise InvalidPayloadError(payload_error_message(data))

    ism = data["ism"]
    interfaces = derive_interfaces(ism, options)
    sections = build_sections(
        ism,
        raw_docs=_list_or_none(data.get("raw_docs")),
        doc_chunks=_list_or_none(data.get("doc_chunks")),
        options=options,
    )
    logger.info("Derived %d interfaces and %d sections", len(interfaces), len(sections))

    return TransformResult(
        title=_title(ism["doc_meta"]),
        interfaces=interfaces,
        sections=sections,
        warnings=_warnings(data.get("diag")),
    )


def _title(doc_meta) -> str:
    if isinstance(doc_meta, dict) and doc_meta.get("title"):
        return str(doc_meta["title"])
    return "AI生成接口"


def _warnings(diag) -> list[str]:
    if not isinstance(diag, dict) or not isinstance(diag.get("warnings"), list):
        return []
    return [str(w) for w in diag["warnings"]]


def _list_or_none(value) -> list | None:
    return value if isinstance(value, list) else None
