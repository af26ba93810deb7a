"""Ordered keyword rules for HTTP method and endpoint inference.

Each table is a list of ``(predicate, result)`` pairs evaluated top to
bottom against an interface's ``type`` tag and ``name``; the first matching
predicate wins. Several rules can match one record, so order matters.
"""

from typing import Callable

Rule = tuple[Callable[[str, str], bool], str]

DEFAULT_METHOD = "GET"
DEFAULT_ENDPOINT = "/api/v1/data"


def _type_has(*keywords: str) -> Callable[[str, str], bool]:
    return lambda type_tag, name: any(k in type_tag for k in keywords)


def _type_or_name_has(type_keyword: str, name_keyword: str) -> Callable[[str, str], bool]:
    return lambda type_tag, name: type_keyword in type_tag or name_keyword in name


METHOD_RULES: list[Rule] = [
    (_type_has("trend", "analysis"), "GET"),
    (_type_has("filter", "search"), "GET"),
    (_type_or_name_has("create", "创建"), "POST"),
    (_type_or_name_has("update", "更新"), "PUT"),
    (_type_or_name_has("delete", "删除"), "DELETE"),
    (_type_has("display", "list"), "GET"),
]

ENDPOINT_RULES: list[Rule] = [
    (_type_or_name_has("trend", "趋势"), "/api/v1/trends"),
    (_type_or_name_has("filter", "筛选"), "/api/v1/filter"),
    (_type_or_name_has("analytics", "指标"), "/api/v1/metrics"),
    (_type_or_name_has("material", "素材"), "/api/v1/materials"),
    (_type_or_name_has("company", "公司"), "/api/v1/companies"),
]


def first_match(rules: list[Rule], type_tag: str, name: str, default: str) -> str:
    for predicate, result in rules:
        if predicate(type_tag, name):
            return result
    return default


def infer_method(type_tag: str, name: str) -> str:
    """HTTP method for an interface, ``GET`` when nothing matches."""
    return first_match(METHOD_RULES, type_tag, name, DEFAULT_METHOD)


def infer_endpoint(type_tag: str, name: str) -> str:
    """Endpoint path for an interface, ``/api/v1/data`` when nothing matches."""
    return first_match(ENDPOINT_RULES, type_tag, name, DEFAULT_ENDPOINT)
