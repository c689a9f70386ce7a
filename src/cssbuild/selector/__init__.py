from cssbuild.selector.builder import (
    COMBINATORS,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from cssbuild.selector.errors import OrderError, SelectorError, UniquenessError
from cssbuild.selector.model import Category, Selector

__all__ = [
    "COMBINATORS",
    "Category",
    "OrderError",
    "Selector",
    "SelectorError",
    "UniquenessError",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
]
