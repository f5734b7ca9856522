"""Domain-level exceptions raised by value objects."""


class SubscriberValidationError(ValueError):
    """Raised when raw subscriber input violates a domain invariant.

    Attributes:
        value: The rejected input, kept so callers can report it back.
        reason: Human-readable description of the violated rule.
    """

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(reason)
        self.value = value
        self.reason = reason
