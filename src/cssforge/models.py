"""
models.py
=========
Pydantic models for selector fragments.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

COMBINATORS = frozenset({' ', '>', '+', '~'})


class FragmentKind(str, Enum):
    """Kinds of compound selector fragments, declared in canonical order.

    The declaration order is the grammar order: a fragment may only be
    followed by fragments of the same or a later kind.
    """

    ELEMENT = 'element'
    ID = 'id'
    CLASS = 'class'
    ATTRIBUTE = 'attribute'
    PSEUDO_CLASS = 'pseudo-class'
    PSEUDO_ELEMENT = 'pseudo-element'

    @property
    def rank(self) -> int:
        """Return the canonical position of this kind (element=0)."""
        return _RANKS[self]

    @property
    def is_singleton(self) -> bool:
        """Return True if this kind may appear at most once per selector."""
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        """Wrap a raw value in this kind's delimiters."""
        prefix, suffix = _DELIMITERS[self]
        return f'{prefix}{value}{suffix}'


_RANKS = {kind: rank for rank, kind in enumerate(FragmentKind)}

SINGLETON_KINDS = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})

_DELIMITERS = {
    FragmentKind.ELEMENT: ('', ''),
    FragmentKind.ID: ('#', ''),
    FragmentKind.CLASS: ('.', ''),
    FragmentKind.ATTRIBUTE: ('[', ']'),
    FragmentKind.PSEUDO_CLASS: (':', ''),
    FragmentKind.PSEUDO_ELEMENT: ('::', ''),
}


class Fragment(BaseModel):
    """A single typed piece of a compound selector.

    Attributes:
        kind: Fragment kind, decides the delimiters and ordering rank
        value: Raw value, passed through verbatim

    """

    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    value: str = Field(description='Raw fragment value, not escaped')

    @property
    def rendered(self) -> str:
        """Return the canonical CSS text of this fragment."""
        return self.kind.render(self.value)
