"""
cssforge - CSS Selector Builder
===============================

cssforge builds CSS compound and complex selectors from typed fragments,
checking that fragments follow the grammar order and that element, id and
pseudo-element appear only once.

Main Components:
    - Selector: Compound selector built by chained fragment calls
    - ComplexSelector: Two selectors joined by a combinator
    - CssSelectorBuilder: Facade creating a fresh selector per call
    - BuilderConfig: Builder options (strict combinator checking)

Example:
    >>> from cssforge import css_selector_builder as builder
    >>> builder.combine(builder.element('div').id('main'), '+', builder.element('table').id('data')).stringify()
    'div#main + table#data'
"""

__version__ = '0.1.0'

from cssforge.builder import (
    BaseSelector,
    ComplexSelector,
    CssSelectorBuilder,
    Selector,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from cssforge.config import BuilderConfig, load_config
from cssforge.exceptions import (
    CombinatorError,
    CssForgeError,
    NonRepetitiveError,
    OrderError,
    SelectorBuildError,
    SerializationError,
)
from cssforge.models import COMBINATORS, Fragment, FragmentKind
from cssforge.serialization import from_json, get_json
from cssforge.shapes import Rectangle
from cssforge.utils import setup_logging

__all__ = [
    # Builder
    'BaseSelector',
    'ComplexSelector',
    'CssSelectorBuilder',
    'Selector',
    'css_selector_builder',
    'element',
    'id_',
    'class_',
    'attr',
    'pseudo_class',
    'pseudo_element',
    'combine',
    # Models
    'COMBINATORS',
    'Fragment',
    'FragmentKind',
    # Configuration
    'BuilderConfig',
    'load_config',
    'setup_logging',
    # Exceptions
    'CssForgeError',
    'SelectorBuildError',
    'OrderError',
    'NonRepetitiveError',
    'CombinatorError',
    'SerializationError',
    # Value objects and JSON helpers
    'Rectangle',
    'get_json',
    'from_json',
]
