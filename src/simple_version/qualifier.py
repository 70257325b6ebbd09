"""Release-stage qualifier attached to a version.

A qualifier is a tagged variant over three stages:

======== ============= =====================
Stage    Number        Rendered as
======== ============= =====================
Release  always ``0``  ``release``
Beta     ``n >= 0``    ``beta`` / ``beta{n}``
Alpha    ``n >= 0``    ``alpha`` / ``alpha{n}``
======== ============= =====================

Ordering is by stage first (``ALPHA < BETA < RELEASE``), then by number.
A finished release therefore outranks every beta and alpha of the same
numeric version, and any beta outranks any alpha regardless of numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class QualifierKind(IntEnum):
    """Release stage.  Integer values define the ordering."""

    ALPHA = 0
    BETA = 1
    RELEASE = 2


@dataclass(frozen=True, order=True)
class VersionType:
    """An immutable qualifier: one stage plus its sequence number.

    Attributes:
        kind:   The release stage.
        number: Sequence number within the stage.  Must be ``0`` for
                :attr:`QualifierKind.RELEASE`.

    Raises:
        ValueError: On a negative number, or a non-zero release number.
    """

    kind: QualifierKind
    number: int = 0

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError(f"qualifier number must be non-negative, got {self.number}")
        if self.kind is QualifierKind.RELEASE and self.number != 0:
            raise ValueError("release qualifier does not take a number")

    @classmethod
    def release(cls) -> VersionType:
        return cls(QualifierKind.RELEASE)

    @classmethod
    def beta(cls, number: int = 0) -> VersionType:
        return cls(QualifierKind.BETA, number)

    @classmethod
    def alpha(cls, number: int = 0) -> VersionType:
        return cls(QualifierKind.ALPHA, number)

    @property
    def is_prerelease(self) -> bool:
        return self.kind is not QualifierKind.RELEASE

    def __str__(self) -> str:
        label = self.kind.name.lower()
        if self.number == 0:
            return label
        return f"{label}{self.number}"


RELEASE = VersionType.release()
