"""Request/response role classification of field access expressions."""

from ism_transform.models import Role

# Checked in order against the lower-cased expression; first match wins.
EXPRESSION_RULES = [
    (lambda expr: expr.startswith(("query", "request")), Role.REQUEST),
    (lambda expr: expr.startswith("response"), Role.RESPONSE),
    (lambda expr: "response.data" in expr or "items[" in expr, Role.RESPONSE),
    (lambda expr: "params." in expr, Role.REQUEST),
]

DEFAULT_ROLE = Role.REQUEST


def classify_expression(expression: str | None) -> Role:
    """Classify an expression such as ``query.page`` or ``response.data.total``."""
    expr = (expression or "").strip().lower()
    if not expr:
        return DEFAULT_ROLE
    for predicate, role in EXPRESSION_RULES:
        if predicate(expr):
            return role
    return DEFAULT_ROLE
