"""cssbuild: CSS selector builder and small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuild.config import CssbuildConfig
from cssbuild.objects import Rectangle, from_json, to_json
from cssbuild.selector import (
    COMBINATORS,
    Category,
    OrderError,
    Selector,
    SelectorError,
    UniquenessError,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)

__all__ = [
    "__version__",
    "CssbuildConfig",
    # selector
    "COMBINATORS",
    "Category",
    "Selector",
    "SelectorError",
    "UniquenessError",
    "OrderError",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
    # objects
    "Rectangle",
    "from_json",
    "to_json",
]
