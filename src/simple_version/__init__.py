"""simple_version: a small, totally ordered version value type.

A :class:`Version` is ``major.minor.patch`` with an optional build number and
an optional release/beta/alpha qualifier::

    from simple_version import Version

    Version(1, 2, 3).with_build(4)     # 1.2.3+4
    Version(1, 0, 0).beta(2)           # v1.0.0-beta2
    Version.from_pkg("1.2.3")          # v1.2.3-release

See :mod:`simple_version.version` for the ordering rules and
:mod:`simple_version.metadata` for building versions from packaging metadata.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

from simple_version.errors import ParseContext, ParseError, UnknownNumericTypeError, VersionError
from simple_version.metadata import (
    version_from_env,
    version_from_package,
    version_from_parts,
    version_from_string,
)
from simple_version.numeric import (
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    IntegerType,
    get_numeric_type,
)
from simple_version.qualifier import QualifierKind, VersionType
from simple_version.version import Version

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# If the package is imported without being installed (running from a source
# checkout), fall back to "0.0.0-dev".
# ---------------------------------------------------------------------------
try:
    __version__: str = _distribution_version("simple_version")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Version",
    "VersionType",
    "QualifierKind",
    "IntegerType",
    "get_numeric_type",
    "U8",
    "U16",
    "U32",
    "U64",
    "I8",
    "I16",
    "I32",
    "I64",
    "version_from_parts",
    "version_from_package",
    "version_from_env",
    "version_from_string",
    "VersionError",
    "ParseError",
    "ParseContext",
    "UnknownNumericTypeError",
    "__version__",
]
