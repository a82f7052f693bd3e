from __future__ import annotations


class OptionSetError(ValueError):
    """Raised when an option set breaks its size or label constraints."""


class InputClosedError(EOFError):
    """Input ended while the session was still waiting for data."""

    def __init__(self, awaiting: str) -> None:
        super().__init__(f"Input closed while waiting for {awaiting}")
        self.awaiting = awaiting
