"""Build match predicates from search tokens."""

from typing import Any, Callable, Iterable

Predicate = Callable[[Any], bool]


def _field_value(row: Any, field: str) -> str:
    if isinstance(row, dict):
        value = row.get(field)
    else:
        value = getattr(row, field, None)
    return "" if value is None else str(value)


def build_token_predicate(tokens: Iterable[str], field: str) -> Predicate:
    """
    Build a predicate matching rows whose `field` contains every token.

    Matching is case-insensitive substring containment, independent of token
    order. A token prefixed with "-" (and longer than the dash) excludes rows
    containing the rest of the token.

    Args:
        tokens: Search fragments, e.g. the words of a user query
        field: Attribute (or dict key) to match against

    Returns:
        Callable taking a row and returning True if it matches
    """
    required: list[str] = []
    excluded: list[str] = []
    for token in tokens:
        if not token:
            continue
        if token.startswith("-") and len(token) > 1:
            excluded.append(token[1:].lower())
        else:
            required.append(token.lower())

    def predicate(row: Any) -> bool:
        value = _field_value(row, field).lower()
        if any(token not in value for token in required):
            return False
        return not any(token in value for token in excluded)

    return predicate
