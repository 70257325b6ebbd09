"""The :class:`Version` value type.

A version is ``major.minor.patch`` plus two independent, optional refinements:

- a **build number** (``build``), rendered after a ``+``;
- a **qualifier** (``version_type``), one of release / beta(n) / alpha(n).

Examples::

    >>> str(Version(1, 2, 3))
    '1.2.3'
    >>> str(Version(1, 2, 3).with_build(4))
    '1.2.3+4'
    >>> str(Version(1, 0, 0).beta(3))
    'v1.0.0-beta3'
    >>> Version(1, 0, 0).release() > Version(1, 0, 0).beta(9)
    True

Ordering
--------
Versions compare most-significant first:

1. ``major``, ``minor``, ``patch`` numerically.
2. Qualifier: release > beta > alpha; equal stages compare by number.
   An untagged version (``version_type is None``) ranks as a release.
3. Build: no build < any build; two builds compare numerically.

Every pair of versions is comparable, and ``==`` agrees with the ordering,
so ``Version(1, 2, 3) == Version(1, 2, 3).release()`` even though the two
render differently.

Mutability
----------
Fields are plain attributes and may be reassigned at any time; comparisons
and ``str()`` always read the current values.  The fluent methods
(:meth:`with_build`, :meth:`release`, :meth:`beta`, :meth:`alpha`) mutate the
instance **in place** and return it.  Use :meth:`copy` first when the
original must be kept.  Being mutable, versions are not hashable.
"""

from __future__ import annotations

import copy as _copy
import functools
from dataclasses import dataclass

from simple_version.numeric import U16, IntegerType, split_triple
from simple_version.qualifier import RELEASE, VersionType


@functools.total_ordering
@dataclass(eq=False)
class Version:
    """A ``major.minor.patch`` version with optional build and qualifier.

    Construction performs no validation: any mutually ordered numbers are
    accepted, including zero and very large values.

    Attributes:
        major:        Major component.
        minor:        Minor component.
        patch:        Patch component.
        build:        Optional build number, ``None`` when absent.
        version_type: Optional qualifier, ``None`` when untagged.
    """

    major: int
    minor: int
    patch: int
    build: int | None = None
    version_type: VersionType | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_pkg(cls, text: str, *, numeric_type: IntegerType = U16) -> Version:
        """Parse ``"MAJOR.MINOR.PATCH"`` into a release-tagged version.

        Exactly three ``.``-separated parts are required, each a
        non-negative decimal integer within ``numeric_type`` (unsigned
        16-bit by default).  No pre-release or build suffix is accepted.

        Raises:
            ParseError: On the wrong number of parts or a bad component.
        """
        major, minor, patch = (
            numeric_type.parse(part, component=name)
            for part, name in zip(split_triple(text), ("major", "minor", "patch"))
        )
        return cls(major, minor, patch).release()

    def copy(self) -> Version:
        """Return an independent copy of this version."""
        return _copy.copy(self)

    # ------------------------------------------------------------------
    # Fluent tagging (in place)
    # ------------------------------------------------------------------

    def with_build(self, build: int) -> Version:
        """Set the build number, replacing any previous one.  Returns ``self``."""
        self.build = build
        return self

    def release(self) -> Version:
        """Tag as a release, discarding any beta/alpha number.  Returns ``self``."""
        self.version_type = RELEASE
        return self

    def beta(self, number: int = 0) -> Version:
        """Tag as ``beta{number}``.  Returns ``self``."""
        self.version_type = VersionType.beta(number)
        return self

    def alpha(self, number: int = 0) -> Version:
        """Tag as ``alpha{number}``.  Returns ``self``."""
        self.version_type = VersionType.alpha(number)
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def qualifier(self) -> VersionType:
        """The effective qualifier; untagged versions report a release."""
        return self.version_type if self.version_type is not None else RELEASE

    @property
    def is_prerelease(self) -> bool:
        return self.qualifier.is_prerelease

    def sort_key(self) -> tuple:
        """Key implementing the total order described in the module docstring."""
        build_key = (0, 0) if self.build is None else (1, self.build)
        return (self.major, self.minor, self.patch, self.qualifier, build_key)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.version_type is not None:
            core = f"v{core}-{self.version_type}"
        if self.build is not None:
            return f"{core}+{self.build}"
        return core
