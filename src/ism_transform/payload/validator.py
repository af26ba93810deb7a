"""Shape checks and unwrapping for workflow engine responses."""


class InvalidPayloadError(ValueError):
    """The backend response cannot be transformed; the message is user-facing."""


def is_present(value) -> bool:
    """Whether a payload value counts as set.

    Empty containers count as set; only None, False, zero and "" do not.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def is_valid_backend_payload(data) -> bool:
    """True when ``data`` has ``ism.doc_meta`` and an ``ism.interfaces`` list."""
    if not isinstance(data, dict):
        return False
    ism = data.get("ism")
    if not isinstance(ism, dict):
        return False
    return is_present(ism.get("doc_meta")) and isinstance(ism.get("interfaces"), list)


def extract_backend_data(response: dict) -> dict | None:
    """Return the payload dict from a direct, ``values`` or ``result`` response.

    Returns None when none of the known shapes carries an ISM.
    """
    if not isinstance(response, dict):
        return None

    ism = response.get("ism")
    if isinstance(ism, dict) and is_present(ism.get("doc_meta")) and ism.get("interfaces") is not None:
        return response

    for envelope in ("values", "result"):
        wrapped = response.get(envelope)
        if isinstance(wrapped, dict) and wrapped.get("ism"):
            return wrapped

    return None


def payload_error_message(response) -> str:
    """Explain why a response was rejected."""
    if not isinstance(response, dict):
        return "后端返回的数据不是有效的对象"

    error = response.get("__error__")
    if error:
        if isinstance(error, dict):
            return str(error.get("message") or error.get("error") or "未知错误")
        return str(error)

    ism = response.get("ism")
    if not ism:
        return "后端未返回有效的ISM数据"
    if not isinstance(ism, dict) or not is_present(ism.get("doc_meta")):
        return "后端返回的ISM数据缺少文档元信息"
    if not isinstance(ism.get("interfaces"), list):
        return "后端返回的ISM数据缺少接口信息"

    return "后端处理失败"
