"""Error types raised by the rule engine."""


class JssError(Exception):
    """Base class for all errors raised by jss."""


class InvalidRuleInput(JssError):
    """Raised when a rule's value does not fit the shape its selector implies."""

    def __init__(
        self, message: str, selector: str | None = None, kind: str | None = None
    ):
        self.selector = selector
        self.kind = kind
        super().__init__(message)
