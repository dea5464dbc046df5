"""Generator for unique, reproducible class names."""

from __future__ import annotations


class IdGenerator:
    """Issue class names of the form ``<prefix>-<namespace>-<sequence>``.

    Names are unique for as long as the counters are not reset.  ``reset()``
    exists for deterministic test runs; calling it mid-session can hand out
    names that were already issued.
    """

    def __init__(self, prefix: str = "jss", namespace: int = 0) -> None:
        self.prefix = prefix
        self.namespace = namespace
        self.sequence = 0

    def next(self) -> str:
        """Return the next class name and advance the sequence counter."""
        token = f"{self.prefix}-{self.namespace}-{self.sequence}"
        self.sequence += 1
        return token

    def reset(self) -> None:
        """Set both counters back to zero."""
        self.namespace = 0
        self.sequence = 0

    def __repr__(self) -> str:
        return f"IdGenerator(prefix={self.prefix!r}, namespace={self.namespace}, sequence={self.sequence})"
