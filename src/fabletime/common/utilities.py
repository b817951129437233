"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable, Sequence


LIST_DELIMITER: str = ","
"""``str``: delimiter used when storing ordered string lists as a single string."""


def splitList(list_string: str, delimiter: str = LIST_DELIMITER) -> tuple[str, ...]:
    """Split a delimited string into an ordered sequence of strings.

    Surrounding whitespace is stripped from each item. An empty string yields an empty tuple.

    Args:
        list_string (``str``): delimited string, e.g. ``"AM, PM"``.
        delimiter (``str``, optional): item delimiter. Defaults to :data:`.LIST_DELIMITER`.

    Returns:
        ``tuple``: ordered items of the list.
    """
    if not list_string:
        return ()
    return tuple(item.strip() for item in list_string.split(delimiter))


def joinList(items: Iterable[str], delimiter: str = LIST_DELIMITER) -> str:
    """Join an ordered sequence of strings into a single delimited string.

    Args:
        items (``iterable``): strings to join. None of them may contain `delimiter`.
        delimiter (``str``, optional): item delimiter. Defaults to :data:`.LIST_DELIMITER`.

    Raises:
        ValueError: if an item contains the delimiter, since it could not be split back.

    Returns:
        ``str``: delimited string.
    """
    items = tuple(items)
    for item in items:
        if delimiter in item:
            raise ValueError(f"List item {item!r} contains the delimiter {delimiter!r}")
    return f"{delimiter} ".join(items) if delimiter == LIST_DELIMITER else delimiter.join(items)


def getListItem(items: Sequence[str], index: int, default: str = "") -> str:
    """Return the item at `index`, wrapping the index around the length of `items`.

    Args:
        items (``Sequence``): ordered list of strings.
        index (``int``): position to look up; any integer is wrapped with a modulo.
        default (``str``, optional): value returned for an empty list. Defaults to ``""``.

    Returns:
        ``str``: the wrapped list item.
    """
    if not items:
        return default
    return items[index % len(items)]
