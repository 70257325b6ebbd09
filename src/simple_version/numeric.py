"""Fixed-width integer descriptors used when parsing version components.

Python integers are unbounded, so a :class:`~simple_version.version.Version`
built in code accepts any ordered number without checks.  Parsing is where a
width matters: :meth:`Version.from_pkg` reads components as unsigned 16-bit
values, and the build-metadata helpers read them as whatever width the
configuration (or the caller) selects.

Usage::

    from simple_version.numeric import U16, get_numeric_type

    U16.parse("65535")                  # 65535
    U16.parse("65536")                  # ParseError: out of range
    get_numeric_type("u32").max_value   # 4294967295

Accepted input is deliberately narrow: ASCII decimal digits only.  Leading
zeros are allowed (``"007"`` is ``7``); signs, whitespace, underscores and
non-ASCII digits are rejected.  Component strings are always non-negative,
even for signed types, which only widen or narrow the upper bound.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import NoReturn

from simple_version.errors import ParseContext, ParseError, UnknownNumericTypeError

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class IntegerType:
    """A named integer range, e.g. ``u16`` = ``[0, 65535]``.

    Attributes:
        name:   Registry name (``"u8"``, ``"i32"``, ...).
        bits:   Width in bits.
        signed: Whether the range is two's-complement signed.
    """

    name: str
    bits: int
    signed: bool = False

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Return True when ``value`` fits this type's range."""
        return self.min_value <= value <= self.max_value

    def parse(self, text: str, *, component: str = "value") -> int:
        """Parse ``text`` as a non-negative decimal integer within range.

        Args:
            text:      Raw component string.
            component: Name used in the error context (``"major"`` etc.).

        Returns:
            The parsed integer.

        Raises:
            ParseError: If ``text`` is not ASCII digits or does not fit.
        """
        if not _DIGITS_RE.fullmatch(text):
            _reject(text, component, "not a non-negative integer")
        out_of_range = f"out of range for {self.name} (max {self.max_value})"
        # Leading zeros do not count towards int()'s digit limit.
        digits = text.lstrip("0") or "0"
        try:
            value = int(digits)
        except ValueError as exc:
            _reject(text, component, out_of_range, cause=exc)
        if not self.contains(value):
            _reject(text, component, out_of_range)
        return value

    def __str__(self) -> str:
        return self.name


def _reject(
    text: str,
    component: str,
    reason: str,
    *,
    cause: Exception | None = None,
) -> NoReturn:
    context = ParseContext(text=text, component=component, reason=reason)
    logger.debug("Rejected %s component %r: %s", component, text[:40], reason)
    raise ParseError(context=context, cause=cause) from cause


def split_triple(text: str) -> list[str]:
    """Split ``"MAJOR.MINOR.PATCH"`` into its three component strings.

    Only the part count is checked here; each part still goes through
    :meth:`IntegerType.parse`.

    Raises:
        ParseError: If ``text`` does not have exactly three ``.``-separated parts.
    """
    parts = text.split(".")
    if len(parts) != 3:
        _reject(text, "version", f"expected 3 dot-separated parts, got {len(parts)}")
    return parts


# =============================================================================
# REGISTRY
# =============================================================================

U8 = IntegerType("u8", 8)
U16 = IntegerType("u16", 16)
U32 = IntegerType("u32", 32)
U64 = IntegerType("u64", 64)
I8 = IntegerType("i8", 8, signed=True)
I16 = IntegerType("i16", 16, signed=True)
I32 = IntegerType("i32", 32, signed=True)
I64 = IntegerType("i64", 64, signed=True)

NUMERIC_TYPES: dict[str, IntegerType] = {
    t.name: t for t in (U8, U16, U32, U64, I8, I16, I32, I64)
}


def get_numeric_type(name: str | IntegerType) -> IntegerType:
    """Look up an :class:`IntegerType` by name (case-insensitive).

    Passing an :class:`IntegerType` returns it unchanged, so call sites can
    accept either form.

    Raises:
        UnknownNumericTypeError: If no type is registered under ``name``.
    """
    if isinstance(name, IntegerType):
        return name
    try:
        return NUMERIC_TYPES[name.strip().lower()]
    except KeyError:
        raise UnknownNumericTypeError(name) from None
