"""Selector facade: one constructor per category, each starting a fresh Selector."""

from __future__ import annotations

from types import SimpleNamespace

from cssbuild.selector.model import Selector

__all__ = [
    "COMBINATORS",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
]

# descendant, adjacent sibling, general sibling, child
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


def element(value: str) -> Selector:
    return Selector().element(value)


def id_(value: str) -> Selector:
    return Selector().id(value)


def class_(value: str) -> Selector:
    return Selector().class_(value)


def attr(value: str) -> Selector:
    return Selector().attr(value)


def pseudo_class(value: str) -> Selector:
    return Selector().pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    return Selector().pseudo_element(value)


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two built selectors with *combinator* into a new Selector.

    Both operands are rendered immediately, so their buffers are drained.
    """
    return Selector().combine(left, combinator, right)


css_selector_builder = SimpleNamespace(
    element=element,
    id=id_,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)
