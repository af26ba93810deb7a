"""Backend type token normalization."""

TYPE_MAP = {
    "string": "string",
    "number": "number",
    "float64": "number",
    "int": "number",
    "boolean": "boolean",
    "date": "string",
    "array": "array",
    "object": "object",
}

DEFAULT_TYPE = "string"


def normalize_type(token: str | None) -> str:
    """Map a backend type token to string / number / boolean / object / array.

    Unknown or empty tokens fall back to ``string``.
    """
    if not isinstance(token, str):
        return DEFAULT_TYPE
    return TYPE_MAP.get(token.strip().lower(), DEFAULT_TYPE)
