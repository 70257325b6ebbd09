"""Typed exceptions for the simple_version package.

Every failure the package can surface derives from :exc:`VersionError`, which
is itself a :exc:`ValueError` so callers that only care about "bad input" can
keep catching the builtin.

Design intent:
    - Parse failures are never silently defaulted.  They raise
      :exc:`ParseError` carrying a :class:`ParseContext` that names the
      offending text and component.
    - Comparison and formatting of constructed values never raise.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParseContext:
    """Structured metadata carried by :exc:`ParseError`.

    Attributes:
        text: The raw input that was rejected.
        component: Which part of the version was being parsed (for example
            ``"major"`` or ``"version"``).
        reason: Short human-readable reason for the rejection.
    """

    text: str
    component: str
    reason: str


class VersionError(ValueError):
    """Base exception for simple_version failures."""


class ParseError(VersionError):
    """A version string (or one of its components) could not be parsed.

    Args:
        context: Structured description of what was rejected and why.
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        *,
        context: ParseContext,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(f"{context.component}: {context.reason} ({context.text!r})")
        self.context = context
        self.cause = cause


class UnknownNumericTypeError(VersionError, KeyError):
    """No :class:`~simple_version.numeric.IntegerType` is registered under a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown numeric type: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
