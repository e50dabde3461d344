"""Result-shape predicates.

Each predicate takes a decoded JSON value and answers whether it has the
shape an action is expected to return. Combinators build the composite
checks the services need (e.g. "a list of as many booleans as card IDs
sent").

JSON booleans decode to Python ``bool``, which is a subclass of ``int``;
the integer predicates reject booleans explicitly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Predicate = Callable[[Any], bool]


def is_null(value: Any) -> bool:
    return value is None


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_false(value: Any) -> bool:
    return value is False


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    """Accept ints, floats and strings holding a decimal number.

    Model IDs come back from ``createModel`` as numeric strings.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return False
        return True
    return False


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_list(value: Any) -> bool:
    return isinstance(value, list)


def is_dict(value: Any) -> bool:
    return isinstance(value, dict)


def either(*predicates: Predicate) -> Predicate:
    """Match when any of the predicates matches."""

    def check(value: Any) -> bool:
        return any(predicate(value) for predicate in predicates)

    return check


def list_of(item: Predicate, length: int | None = None) -> Predicate:
    """Match a list whose items all satisfy ``item``.

    Args:
        item: Predicate applied to every element
        length: Required length, or None for any length
    """

    def check(value: Any) -> bool:
        if not isinstance(value, list):
            return False
        if length is not None and len(value) != length:
            return False
        return all(item(element) for element in value)

    return check


def has_keys(**members: Predicate) -> Predicate:
    """Match an object holding every named member with the given shape.

    Example:
        >>> has_keys(id=is_int)({"id": 1, "name": "Default"})
        True
    """

    def check(value: Any) -> bool:
        if not isinstance(value, dict):
            return False
        return all(
            name in value and predicate(value[name])
            for name, predicate in members.items()
        )

    return check


def dict_of(item: Predicate) -> Predicate:
    """Match an object whose values all satisfy ``item``."""

    def check(value: Any) -> bool:
        if not isinstance(value, dict):
            return False
        return all(item(element) for element in value.values())

    return check
