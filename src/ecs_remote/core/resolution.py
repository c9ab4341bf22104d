"""Shared resolution step: explicit hint match or interactive choice."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from .errors import ResourceNotFoundError

T = TypeVar("T")

Selector = Callable[[str, list[str]], int]


def choose(items: Sequence[T], display: Callable[[T], str], prompt: str, selector: Selector) -> T:
    index = selector(prompt, [display(item) for item in items])
    return items[index]


def resolve_choice(
    items: Sequence[T],
    hint: str | None,
    matches: Callable[[T, str], bool],
    display: Callable[[T], str],
    prompt: str,
    selector: Selector,
    kind: str,
) -> T:
    """Return the first item matching ``hint``, or let the operator pick one.

    Items are tried in the order given; the first match wins even when later
    items would also match. A hint that matches nothing raises
    ResourceNotFoundError naming the hint.
    """
    if hint is None:
        return choose(items, display, prompt, selector)

    for item in items:
        if matches(item, hint):
            return item
    raise ResourceNotFoundError(kind, hint)
