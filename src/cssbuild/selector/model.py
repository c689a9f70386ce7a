"""Selector model: the category rank table and the accumulating Selector builder."""

from __future__ import annotations

import logging
from enum import Enum

from cssbuild.selector.errors import OrderError, UniquenessError

logger = logging.getLogger(__name__)


class Category(Enum):
    """A selector part kind, in the order parts must appear.

    Each member carries ``(rank, prefix, suffix, repeatable)``.
    """

    ELEMENT = (1, "", "", False)
    ID = (2, "#", "", False)
    CLASS = (3, ".", "", True)
    ATTRIBUTE = (4, "[", "]", True)
    PSEUDO_CLASS = (5, ":", "", True)
    PSEUDO_ELEMENT = (6, "::", "", False)

    def __init__(self, rank: int, prefix: str, suffix: str, repeatable: bool) -> None:
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.repeatable = repeatable

    @classmethod
    def from_rank(cls, rank: int) -> Category:
        for category in cls:
            if category.rank == rank:
                return category
        raise ValueError(f"No selector category with rank {rank}")

    def format(self, token: str) -> str:
        return f"{self.prefix}{token}{self.suffix}"


class Selector:
    """Accumulating builder for one compound CSS selector.

    Parts are appended through chained calls, each returning ``self``::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Appends must follow :class:`Category` rank order, and element, id and
    pseudo-element may appear once. :meth:`render` returns the text built so
    far and empties the text buffer; the recorded parts and the current rank
    are kept, so later appends are still validated against them.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._rank = 0
        self._buffer: list[str] = []
        self._appended = False

    # --- recorded parts -------------------------------------------------------

    @property
    def element_part(self) -> str | None:
        return self._element

    @property
    def id_part(self) -> str | None:
        return self._id

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._attributes)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._pseudo_classes)

    @property
    def pseudo_element_part(self) -> str | None:
        return self._pseudo_element

    @property
    def rank(self) -> int:
        """Rank of the most recently appended category, 0 when empty."""
        return self._rank

    @property
    def is_empty(self) -> bool:
        """True until a part or a combined pair has been appended."""
        return not self._appended

    # --- appends --------------------------------------------------------------

    def element(self, value: str) -> Selector:
        self._check(Category.ELEMENT, self._element is not None)
        self._element = value
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        self._check(Category.ID, self._id is not None)
        self._id = value
        return self._append(Category.ID, value)

    def class_(self, value: str) -> Selector:
        self._check(Category.CLASS)
        self._classes.append(value)
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector; *value* is the text inside the brackets."""
        self._check(Category.ATTRIBUTE)
        self._attributes.append(value)
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        self._check(Category.PSEUDO_CLASS)
        self._pseudo_classes.append(value)
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        self._check(Category.PSEUDO_ELEMENT, self._pseudo_element is not None)
        self._pseudo_element = value
        return self._append(Category.PSEUDO_ELEMENT, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Append ``left combinator right``, rendering (and draining) both operands.

        The combinator is written as given; it is not checked against the
        known combinator tokens.
        """
        self._buffer.append(f"{left.render()} {combinator} {right.render()}")
        self._appended = True
        return self

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        """Return the accumulated selector text and clear the text buffer.

        A second call without new appends returns an empty string.
        """
        text = "".join(self._buffer)
        self._buffer.clear()
        logger.debug("Rendered selector %r", text)
        return text

    stringify = render

    # --- internals ------------------------------------------------------------

    def _check(self, category: Category, already_set: bool = False) -> None:
        if already_set:
            logger.debug("Rejected repeated %s part", category.name)
            raise UniquenessError(category)
        if category.rank < self._rank:
            current = Category.from_rank(self._rank)
            logger.debug(
                "Rejected %s part after %s part", category.name, current.name
            )
            raise OrderError(category, current)

    def _append(self, category: Category, value: str) -> Selector:
        self._rank = category.rank
        self._buffer.append(category.format(value))
        self._appended = True
        return self

    def __repr__(self) -> str:
        parts = []
        if self._element is not None:
            parts.append(f"element={self._element!r}")
        if self._id is not None:
            parts.append(f"id={self._id!r}")
        if self._classes:
            parts.append(f"classes={self._classes!r}")
        if self._attributes:
            parts.append(f"attributes={self._attributes!r}")
        if self._pseudo_classes:
            parts.append(f"pseudo_classes={self._pseudo_classes!r}")
        if self._pseudo_element is not None:
            parts.append(f"pseudo_element={self._pseudo_element!r}")
        return f"Selector({', '.join(parts)})"
