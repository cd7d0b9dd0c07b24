"""English list joining.

Feed descriptions list filter labels the way a person would write them:
``"A"``, ``"A and B"``, ``"A, B and C"``. There is no serial comma.
"""

from __future__ import annotations

import typing as typ


def to_sentence(
    items: typ.Sequence[str],
    *,
    separator: str = ", ",
    last_separator: str = " and ",
) -> str:
    """Join ``items`` into an English list.

    Parameters
    ----------
    items:
        Words or phrases to join, in order.
    separator:
        Text placed between all but the last pair of items.
    last_separator:
        Text placed between the last two items.

    Returns
    -------
    str
        The joined list, or an empty string when ``items`` is empty.

    Examples
    --------
    >>> to_sentence(["a", "b", "c"])
    'a, b and c'
    >>> to_sentence(["a"])
    'a'

    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return separator.join(items[:-1]) + last_separator + items[-1]
