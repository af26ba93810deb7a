"""Field synthesis from the legacy dimensions/metrics interface shape.

Older backends describe an interface as categorical ``dimensions`` and
numeric ``metrics`` instead of a flat field list. Dimensions become query
parameters, required metrics become filter conditions, and both are echoed
back in the response payload.
"""

import re

from ism_transform.deriver.mapper import text_value
from ism_transform.deriver.types import normalize_type
from ism_transform.models import FieldSet, RequestField, ResponseField, TransformOptions

DATE_MARKERS = ("天", "日期")
LIST_TYPE_MARKERS = ("display", "list")
DATE_EXPRESSION = "query.date"

PAGINATION_FIELDS = [
    RequestField(id="req-page", name="page", expression="query.page",
                 required=True, type="number", description="页码"),
    RequestField(id="req-pageSize", name="pageSize", expression="query.pageSize",
                 required=True, type="number", description="每页数量"),
]

OUTCOME_FIELDS = [
    ResponseField(id="resp-success", name="success", expression="response.success",
                  required=True, type="boolean", description="请求是否成功"),
    ResponseField(id="resp-message", name="message", expression="response.message",
                  required=True, type="string", description="响应消息"),
]

LIST_PAGE_FIELDS = [
    ResponseField(id="resp-total", name="total", expression="response.data.total",
                  required=True, type="number", description="总数量"),
    ResponseField(id="resp-currentPage", name="currentPage", expression="response.data.currentPage",
                  required=True, type="number", description="当前页码"),
]

_CAMEL_PATTERN = re.compile(r"(?:^\w|[A-Z]|\b\w)", re.ASCII)


def synthesize_fields(record: dict, options: TransformOptions | None = None) -> FieldSet:
    """Derive request and response fields from ``dimensions`` and ``metrics``."""
    options = options or TransformOptions()
    dimensions = _entries(record.get("dimensions"))
    metrics = _entries(record.get("metrics"))
    type_tag = text_value(record.get("type"))

    return FieldSet(
        request_fields=_request_fields(dimensions, metrics, type_tag),
        response_fields=_response_fields(dimensions, metrics, type_tag, options),
    )


def is_list_type(type_tag: str) -> bool:
    return any(marker in type_tag for marker in LIST_TYPE_MARKERS)


def has_date_marker(name: str) -> bool:
    return any(marker in name for marker in DATE_MARKERS)


def to_camel_case(value: str) -> str:
    """``page size`` -> ``pageSize``. Non-ASCII text passes through unchanged."""
    converted = _CAMEL_PATTERN.sub(
        lambda m: m.group(0).lower() if m.start() == 0 else m.group(0).upper(),
        value,
    )
    return re.sub(r"\s+", "", converted)


def _request_fields(dimensions: list[dict], metrics: list[dict], type_tag: str) -> list[RequestField]:
    fields = []

    for index, dimension in enumerate(dimensions):
        name = text_value(dimension.get("name"))
        data_type = text_value(dimension.get("data_type"))
        if data_type.lower() == "date" or has_date_marker(name):
            expression = DATE_EXPRESSION
            field_type = "string"
            label = name or "时间"
        else:
            expression = f"query.{to_camel_case(name or f'param{index}')}"
            field_type = normalize_type(data_type)
            label = name or "维度"
        fields.append(RequestField(
            id=f"req-dim-{index}",
            name=name or f"dimension{index}",
            expression=expression,
            required=bool(dimension.get("required", False)),
            type=field_type,
            description=f"{label}参数",
        ))

    for index, metric in enumerate(metrics):
        if not metric.get("required"):
            continue
        name = text_value(metric.get("name"))
        fields.append(RequestField(
            id=f"req-metric-{index}",
            name=name or f"metric{index}",
            expression=f"query.{to_camel_case(name or f'metric{index}')}",
            required=True,
            type=normalize_type(metric.get("data_type")),
            description=f"{name or '指标'}筛选条件",
        ))

    if is_list_type(type_tag):
        fields.extend(f.model_copy() for f in PAGINATION_FIELDS)

    return fields


def _response_fields(dimensions: list[dict], metrics: list[dict], type_tag: str,
                     options: TransformOptions) -> list[ResponseField]:
    fields = [f.model_copy() for f in OUTCOME_FIELDS] if options.outcome_fields else []

    list_like = is_list_type(type_tag) or any(
        has_date_marker(text_value(d.get("name"))) for d in dimensions
    )

    def _echo(entry: dict, field_id: str, fallback: str, suffix: str) -> ResponseField:
        field_name = text_value(entry.get("name")) or fallback
        if list_like:
            name, expression = f"items[].{field_name}", f"response.data.items[].{field_name}"
        else:
            name, expression = field_name, f"response.data.{field_name}"
        return ResponseField(
            id=field_id,
            name=name,
            expression=expression,
            required=bool(entry.get("required", False)),
            type=normalize_type(entry.get("data_type")),
            description=f"{field_name}{suffix}",
        )

    for index, dimension in enumerate(dimensions):
        fields.append(_echo(dimension, f"resp-dim-{index}", f"dimension{index}", "信息"))
    for index, metric in enumerate(metrics):
        fields.append(_echo(metric, f"resp-metric-{index}", f"metric{index}", "指标"))

    if list_like:
        fields.extend(f.model_copy() for f in LIST_PAGE_FIELDS)

    return fields


def _entries(value) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]
