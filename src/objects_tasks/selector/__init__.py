from objects_tasks.selector.model import Combinator, PartKind, SelectorPart
from objects_tasks.selector.builder import (
    CombinedSelector,
    SelectorBuilder,
    Stringifiable,
    combine,
)
from objects_tasks.selector.facade import CssSelectorBuilder, css_selector_builder

element = css_selector_builder.element
# Not in __all__: shadows the builtin. Use as ``selector.id(...)``.
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element

__all__ = [
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "PartKind",
    "SelectorBuilder",
    "SelectorPart",
    "Stringifiable",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "pseudo_class",
    "pseudo_element",
]
