"""Document outline builder.

The outline is an overview section, then one section per document chunk,
then one generated section per interface. Raw full-document text is
accepted but never rendered; chunk sections replace it.
"""

import logging
import re

from ism_transform.deriver.mapper import text_value
from ism_transform.deriver.rules import infer_endpoint, infer_method
from ism_transform.models import DocumentSection, TransformOptions
from ism_transform.payload.validator import is_present

logger = logging.getLogger(__name__)

REQUIRED_MARK = "（必填）"
OPTIONAL_MARK = "（选填）"

_HEADING = re.compile(r"^\s{0,3}#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)


def build_sections(
    ism: dict,
    raw_docs: list[str] | None = None,
    doc_chunks: list[dict] | None = None,
    options: TransformOptions | None = None,
) -> list[DocumentSection]:
    """Build the ordered outline for a validated ISM."""
    options = options or TransformOptions()
    sections = []

    overview = overview_section(ism)
    if overview is not None:
        sections.append(overview)

    if doc_chunks and options.include_chunks:
        sections.extend(chunk_sections(doc_chunks))

    records = ism.get("interfaces")
    if isinstance(records, list):
        for index, record in enumerate(records):
            if isinstance(record, dict):
                sections.append(interface_section(record, index))

    if raw_docs:
        logger.debug("Ignoring %d raw document(s) in outline", len(raw_docs))

    return sections


def overview_section(ism: dict) -> DocumentSection | None:
    doc_meta = ism.get("doc_meta")
    if not is_present(doc_meta):
        return None
    if not isinstance(doc_meta, dict):
        doc_meta = {}

    title = text_value(doc_meta.get("title"))
    lines = [
        f"文档标题：{title or '未知文档'}",
        f"文档来源：{text_value(doc_meta.get('url'))}",
    ]

    stats = ism.get("parsing_statistics")
    if isinstance(stats, dict):
        mode = text_value(ism.get("__processing_method")) or text_value(doc_meta.get("parsing_mode"))
        lines += [
            "",
            f"文档块总数：{stats.get('total_chunks', 0)}",
            f"含表格的文档块：{stats.get('chunks_with_grid', 0)}",
            f"解析模式：{mode or '未知'}",
        ]

    lines += ["", "本文档包含了系统的接口规范和功能需求。"]

    return DocumentSection(
        id="section-overview",
        title=title or "文档概述",
        content="\n".join(lines),
        is_api=False,
    )


def chunk_sections(doc_chunks: list[dict]) -> list[DocumentSection]:
    """One section per distinct chunk id, in input order, content verbatim."""
    sections = []
    seen: set[str] = set()

    for chunk in doc_chunks:
        if not isinstance(chunk, dict):
            continue
        chunk_id = text_value(chunk.get("chunk_id"))
        if not chunk_id:
            logger.debug("Skipping chunk without chunk_id")
            continue
        if chunk_id in seen:
            logger.debug("Skipping duplicate chunk %s", chunk_id)
            continue
        seen.add(chunk_id)

        content = chunk.get("content")
        content = content if isinstance(content, str) else ""
        metadata = chunk.get("metadata") if isinstance(chunk.get("metadata"), dict) else {}

        sections.append(DocumentSection(
            id=f"section-chunk-{chunk_id}",
            title=chunk_title(content, len(sections) + 1),
            content=content,
            is_api=False,
            chunk_id=chunk_id,
            chunk_type=text_value(chunk.get("chunk_type")) or None,
            importance_score=_score(metadata.get("importance_score")),
        ))

    return sections


def chunk_title(content: str, ordinal: int) -> str:
    """First markdown heading of the chunk, else ``文档片段 <n>``."""
    match = _HEADING.search(content)
    if match:
        return match.group(1).strip()
    return f"文档片段 {ordinal}"


def interface_section(record: dict, index: int) -> DocumentSection:
    name = text_value(record.get("name"))
    type_tag = text_value(record.get("type"))
    display_name = name or f"接口{index + 1}"

    content = (
        f"接口名称：{display_name}\n"
        f"接口类型：{type_tag or '未知'}\n"
        f"请求方法：{infer_method(type_tag, name)}\n"
        f"请求路径：{infer_endpoint(type_tag, name)}\n\n"
    )
    content += _param_block("维度参数：", record.get("dimensions"), "未知维度", "string")
    content += _param_block("指标参数：", record.get("metrics"), "未知指标", "number")
    content += _param_block("字段参数：", record.get("fields"), "未知字段", "string")

    return DocumentSection(
        id=f"section-interface-{index + 1}",
        title=display_name,
        content=content,
        is_api=True,
    )


def _param_block(heading: str, entries, unknown_name: str, default_type: str) -> str:
    if not isinstance(entries, list):
        return ""
    entries = [e for e in entries if isinstance(e, dict)]
    if not entries:
        return ""

    block = f"{heading}\n"
    for entry in entries:
        mark = REQUIRED_MARK if entry.get("required") else OPTIONAL_MARK
        name = text_value(entry.get("name")) or unknown_name
        data_type = text_value(entry.get("data_type") or entry.get("type")) or default_type
        block += f"- {name}: {data_type}{mark}\n"
    return block + "\n"


def _score(value) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
