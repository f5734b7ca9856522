"""SubscriberName value object for validated subscriber names."""

from dataclasses import dataclass
from typing import Self

import regex

from app.newsletter.domain.exceptions import SubscriberValidationError

MAX_NAME_GRAPHEMES = 256
FORBIDDEN_CHARACTERS = frozenset('/()"<>\\{}')

# Extended grapheme cluster, i.e. one user-perceived character
_GRAPHEME = regex.compile(r"\X")


@dataclass(frozen=True)
class SubscriberName:
    """Immutable value object representing a subscriber's display name.

    Checks run in order and stop at the first failure:

    1. The trimmed name must not be empty.
    2. The name must have at most 256 grapheme clusters. Combining marks
       count toward the character they decorate, so ``"a̐"`` is one.
    3. The name must not contain any of ``/ ( ) " < > \\ { }``.

    The original, untrimmed string is kept as-is.

    Attributes:
        value: The validated name.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate name constraints after initialization."""
        if not self.value.strip():
            raise SubscriberValidationError(
                self.value, "Subscriber name must have at least one non-whitespace character"
            )

        if len(_GRAPHEME.findall(self.value)) > MAX_NAME_GRAPHEMES:
            raise SubscriberValidationError(
                self.value,
                f"Subscriber name must be at most {MAX_NAME_GRAPHEMES} characters long",
            )

        if any(char in FORBIDDEN_CHARACTERS for char in self.value):
            raise SubscriberValidationError(
                self.value,
                "Subscriber name can't contain any of the characters "
                + " ".join(sorted(FORBIDDEN_CHARACTERS)),
            )

    @classmethod
    def parse(cls, value: str) -> Self:
        """Create a SubscriberName from untrusted input.

        Raises:
            SubscriberValidationError: If the name breaks any constraint.
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value
