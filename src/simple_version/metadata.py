"""Build a :class:`~simple_version.version.Version` from packaging metadata.

The core contract is :func:`version_from_parts`: given the three numeric
strings a build or packaging system exposes for a project's version, produce
a version or fail with :exc:`~simple_version.errors.ParseError`.

Two thin collaborators feed it from the places those strings usually live:

- :func:`version_from_package` reads an installed distribution's version
  through :mod:`importlib.metadata` (what ``pyproject.toml`` declared at
  build time);
- :func:`version_from_env` reads ``<PREFIX>_MAJOR``, ``<PREFIX>_MINOR`` and
  ``<PREFIX>_PATCH`` environment variables, the shape build tools commonly
  export them in.

Usage::

    from simple_version.metadata import version_from_package

    APP_VERSION = version_from_package("simple_version")

The resulting versions are untagged, so they render as ``"1.2.3"`` and
compare equal to ``Version(1, 2, 3)``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from importlib.metadata import version as distribution_version

from simple_version.config import config
from simple_version.errors import ParseContext, ParseError
from simple_version.numeric import IntegerType, get_numeric_type, split_triple
from simple_version.version import Version

logger = logging.getLogger(__name__)

_COMPONENTS = ("major", "minor", "patch")


def _resolve_numeric_type(numeric_type: IntegerType | str | None) -> IntegerType:
    if numeric_type is None:
        return config.parsing.integer_type
    return get_numeric_type(numeric_type)


def version_from_parts(
    major: str,
    minor: str,
    patch: str,
    *,
    numeric_type: IntegerType | str | None = None,
) -> Version:
    """Assemble a version from three separately supplied numeric strings.

    Args:
        major, minor, patch: Decimal strings, e.g. ``"1"``, ``"2"``, ``"3"``.
        numeric_type: Integer range each component must fit.  Defaults to
            ``config.parsing.numeric_type`` (``u32`` unless configured).

    Returns:
        An untagged :class:`Version` without a build number.

    Raises:
        ParseError: If any component is not a non-negative integer in range.
            The error context names the failing component.
    """
    int_type = _resolve_numeric_type(numeric_type)
    values = [
        int_type.parse(text, component=name)
        for text, name in zip((major, minor, patch), _COMPONENTS)
    ]
    return Version(*values)


def version_from_package(
    distribution: str,
    *,
    numeric_type: IntegerType | str | None = None,
) -> Version:
    """Read an installed distribution's version as a :class:`Version`.

    The distribution's version string must be exactly ``MAJOR.MINOR.PATCH``.
    PEP 440 extras such as ``.dev1``, ``rc1`` or a local ``+abc`` segment are
    not part of this model and are rejected.

    Raises:
        importlib.metadata.PackageNotFoundError: If ``distribution`` is not
            installed.
        ParseError: If its version is not three numeric parts.
    """
    raw = distribution_version(distribution)
    logger.debug("Read version %r from distribution %s", raw, distribution)
    return version_from_string(raw, numeric_type=numeric_type)


def version_from_string(
    text: str,
    *,
    numeric_type: IntegerType | str | None = None,
) -> Version:
    """Split ``"MAJOR.MINOR.PATCH"`` and pass it to :func:`version_from_parts`.

    Unlike :meth:`Version.from_pkg` the result is untagged and the default
    width comes from the configuration.

    Raises:
        ParseError: On the wrong number of parts or a bad component.
    """
    return version_from_parts(*split_triple(text), numeric_type=numeric_type)


def version_from_env(
    prefix: str = "PKG_VERSION",
    *,
    environ: Mapping[str, str] | None = None,
    numeric_type: IntegerType | str | None = None,
) -> Version:
    """Read ``<prefix>_MAJOR``/``_MINOR``/``_PATCH`` from the environment.

    Args:
        prefix: Variable name prefix.
        environ: Mapping to read instead of :data:`os.environ`.
        numeric_type: See :func:`version_from_parts`.

    Raises:
        ParseError: If a variable is missing or not a valid component.
    """
    env = os.environ if environ is None else environ
    parts = []
    for name in _COMPONENTS:
        key = f"{prefix}_{name.upper()}"
        value = env.get(key)
        if value is None:
            context = ParseContext(text=key, component=name, reason="variable is not set")
            logger.debug("Missing version variable %s", key)
            raise ParseError(context=context)
        parts.append(value)
    return version_from_parts(*parts, numeric_type=numeric_type)
