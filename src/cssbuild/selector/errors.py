"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuild.selector.model import Category

UNIQUENESS_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for every rejected selector append."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class UniquenessError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, category: Category) -> None:
        super().__init__(UNIQUENESS_MESSAGE, category=category)


class OrderError(SelectorError):
    """A category was appended after one that must follow it."""

    def __init__(self, category: Category, current: Category) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
        self.current = current
