"""Entry points that start a new selector from a single part."""

from __future__ import annotations

from objects_tasks.selector.builder import (
    CombinedSelector,
    SelectorBuilder,
    Stringifiable,
    combine,
)

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Facade returning a fresh SelectorBuilder for every call.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
