"""
builder.py
==========
Fluent builder for CSS compound and complex selectors.

A compound selector is built by chaining fragment calls in canonical order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Two selectors are joined with a combinator (' ', '>', '+', '~') into a
complex selector.

Example:
    >>> from cssforge import css_selector_builder as builder
    >>> builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
    >>> builder.combine(builder.element('div').id('main'), '+', builder.element('table')).stringify()
    'div#main + table'
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import logfire

from cssforge.config import BuilderConfig
from cssforge.exceptions import CombinatorError, NonRepetitiveError, OrderError
from cssforge.models import COMBINATORS, Fragment, FragmentKind


class BaseSelector(ABC):
    """Common rendering interface of compound and complex selectors."""

    @abstractmethod
    def render(self) -> str:
        """Return the CSS text of this selector."""

    def stringify(self) -> str:
        """Return the CSS text of this selector (alias of render)."""
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.render()!r})'


class Selector(BaseSelector):
    """Compound selector built in place by chained fragment calls.

    Every fragment call returns the selector itself. A call that would break
    the canonical order or repeat a singleton kind raises before anything is
    appended.
    """

    def __init__(self):
        self._fragments: list[Fragment] = []
        self._used: set[FragmentKind] = set()
        self._watermark: FragmentKind | None = None

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """Return the appended fragments in append order."""
        return tuple(self._fragments)

    def element(self, value: str) -> Selector:
        """Append a type selector such as div."""
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append an id selector (#value)."""
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        """Append a class selector (.value); may repeat."""
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector ([value]); may repeat."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Append a pseudo-class (:value); may repeat."""
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Append a pseudo-element (::value)."""
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def render(self) -> str:
        """Return the concatenated fragments without separators."""
        return ''.join(fragment.rendered for fragment in self._fragments)

    def _append(self, kind: FragmentKind, value: str) -> Selector:
        """Validate and append one fragment.

        Args:
            kind: Kind of the fragment to append
            value: Raw fragment value

        Returns:
            This selector, for chaining.

        Raises:
            NonRepetitiveError: If kind is a singleton that is already present.
            OrderError: If a fragment of a later kind was already appended.

        """
        if kind.is_singleton and kind in self._used:
            logfire.warn('Rejected selector fragment', kind=kind.value, reason='non_repetitive', selector=self.render())
            raise NonRepetitiveError(kind)

        if self._watermark is not None and self._watermark.rank > kind.rank:
            logfire.warn('Rejected selector fragment', kind=kind.value, reason='order', selector=self.render())
            raise OrderError(kind, self._watermark)

        self._fragments.append(Fragment(kind=kind, value=value))
        self._used.add(kind)
        self._watermark = kind
        return self


class ComplexSelector(BaseSelector):
    """Two selectors joined by a combinator.

    Only the rendered operands are kept; a complex selector takes no further
    fragments but can itself be combined again.
    """

    def __init__(self, left: BaseSelector, combinator: str, right: BaseSelector):
        self.left = left.render()
        self.combinator = combinator
        self.right = right.render()

    def render(self) -> str:
        # No trimming: the descendant combinator ' ' yields three spaces.
        return f'{self.left} {self.combinator} {self.right}'


def combine(
    left: BaseSelector, combinator: str, right: BaseSelector, config: BuilderConfig | None = None
) -> ComplexSelector:
    """Join two selectors with a combinator token.

    Args:
        left: Selector on the left of the combinator
        combinator: Combinator token, taken verbatim unless strict mode is on
        right: Selector on the right of the combinator
        config: Builder configuration. Defaults to BuilderConfig().

    Returns:
        New complex selector rendering ``left combinator right``.

    Raises:
        CombinatorError: If strict combinators are enabled and the token is
            not one of ' ', '>', '+', '~'.

    """
    config = config or BuilderConfig()
    if config.strict_combinators and combinator not in COMBINATORS:
        logfire.warn('Rejected combinator', combinator=combinator)
        raise CombinatorError(combinator)

    logfire.debug('Combined selectors', combinator=combinator)
    return ComplexSelector(left, combinator, right)


class CssSelectorBuilder:
    """Facade creating a fresh selector for every call.

    Attributes:
        config: Configuration applied when combining selectors

    Example:
        >>> builder = CssSelectorBuilder()
        >>> builder.id('main').class_('container').class_('editable').stringify()
        '#main.container.editable'

    """

    def __init__(self, config: BuilderConfig | None = None):
        self.config = config or BuilderConfig()

    def _new(self) -> Selector:
        return Selector()

    def element(self, value: str) -> Selector:
        """Create a selector starting with a type selector."""
        return self._new().element(value)

    def id(self, value: str) -> Selector:
        """Create a selector starting with an id selector."""
        return self._new().id(value)

    def class_(self, value: str) -> Selector:
        """Create a selector starting with a class selector."""
        return self._new().class_(value)

    def attr(self, value: str) -> Selector:
        """Create a selector starting with an attribute selector."""
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        """Create a selector starting with a pseudo-class."""
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        """Create a selector made of a pseudo-element."""
        return self._new().pseudo_element(value)

    def combine(self, left: BaseSelector, combinator: str, right: BaseSelector) -> ComplexSelector:
        """Join two selectors using this builder's configuration."""
        return combine(left, combinator, right, config=self.config)


css_selector_builder = CssSelectorBuilder()


def element(value: str) -> Selector:
    """Create a selector starting with a type selector."""
    return css_selector_builder.element(value)


def id_(value: str) -> Selector:
    """Create a selector starting with an id selector."""
    return css_selector_builder.id(value)


def class_(value: str) -> Selector:
    """Create a selector starting with a class selector."""
    return css_selector_builder.class_(value)


def attr(value: str) -> Selector:
    """Create a selector starting with an attribute selector."""
    return css_selector_builder.attr(value)


def pseudo_class(value: str) -> Selector:
    """Create a selector starting with a pseudo-class."""
    return css_selector_builder.pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    """Create a selector made of a pseudo-element."""
    return css_selector_builder.pseudo_element(value)
