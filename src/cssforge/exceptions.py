"""Custom exceptions for cssforge."""

from cssforge.models import FragmentKind

ORDER_MESSAGE = (
    'Selector parts should be arranged in the following order: '
    'element, id, class, attribute, pseudo-class, pseudo-element'
)
NON_REPETITIVE_MESSAGE = 'Element, id and pseudo-element should not occur more then one time inside the selector'


class CssForgeError(Exception):
    """Base class for all cssforge exceptions."""

    pass


class SelectorBuildError(CssForgeError):
    """Raised when a selector cannot be built from the requested fragments."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        """Initialize the error.

        Args:
            message: Human-readable description of the broken rule
            kind: Fragment kind whose append was rejected, if any

        """
        self.kind = kind
        super().__init__(message)


class OrderError(SelectorBuildError):
    """Raised when a fragment is appended after a fragment of a later kind."""

    def __init__(self, kind: FragmentKind, blocking_kind: FragmentKind):
        """Initialize order error.

        Args:
            kind: Kind of the rejected fragment
            blocking_kind: Latest kind already present in the selector

        """
        self.blocking_kind = blocking_kind
        super().__init__(ORDER_MESSAGE, kind=kind)


class NonRepetitiveError(SelectorBuildError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: FragmentKind):
        super().__init__(NON_REPETITIVE_MESSAGE, kind=kind)


class CombinatorError(SelectorBuildError):
    """Raised in strict mode when a combinator is not a CSS combinator."""

    def __init__(self, combinator: str):
        self.combinator = combinator
        super().__init__(f'Unsupported combinator {combinator!r}: expected one of " ", ">", "+", "~"')


class SerializationError(CssForgeError):
    """Raised when a value cannot be encoded to or decoded from JSON."""

    pass
