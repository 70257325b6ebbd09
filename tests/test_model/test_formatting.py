"""Unit tests for ``str(Version)``."""

from __future__ import annotations

import pytest

from simple_version import Version


@pytest.mark.unit
class TestUntaggedFormat:
    """Untagged versions render ``M.m.p`` with an optional ``+build``."""

    def test_plain(self) -> None:
        assert str(Version(1, 2, 3)) == "1.2.3"

    def test_with_build(self) -> None:
        assert str(Version(1, 2, 3).with_build(4)) == "1.2.3+4"

    def test_build_zero_still_rendered(self) -> None:
        plain = Version(1, 2, 3)
        with_zero = Version(1, 2, 3).with_build(0)

        assert str(with_zero) == "1.2.3+0"
        assert str(plain) != str(with_zero)

    def test_large_components(self) -> None:
        assert str(Version(65535, 0, 4294967295)) == "65535.0.4294967295"

    def test_format_builtin_and_fstring(self) -> None:
        version = Version(0, 1, 0)

        assert f"{version}" == "0.1.0"
        assert format(version) == "0.1.0"


@pytest.mark.unit
class TestTaggedFormat:
    """Tagged versions render ``vM.m.p-<stage>[n]``."""

    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            (Version(1, 0, 0).release(), "v1.0.0-release"),
            (Version(1, 0, 0).beta(0), "v1.0.0-beta"),
            (Version(1, 0, 0).beta(1), "v1.0.0-beta1"),
            (Version(1, 0, 0).beta(), "v1.0.0-beta"),
            (Version(2, 5, 9).alpha(0), "v2.5.9-alpha"),
            (Version(2, 5, 9).alpha(12), "v2.5.9-alpha12"),
            (Version(1, 0, 0).beta(7).release(), "v1.0.0-release"),
        ],
    )
    def test_tagged(self, version: Version, expected: str) -> None:
        assert str(version) == expected

    def test_build_follows_qualifier(self) -> None:
        assert str(Version(1, 0, 0).beta(3).with_build(42)) == "v1.0.0-beta3+42"

    def test_from_pkg_renders_as_release(self) -> None:
        assert str(Version.from_pkg("3.4.5")) == "v3.4.5-release"

    def test_clearing_tag_restores_plain_format(self) -> None:
        version = Version(1, 0, 0).alpha(1)

        version.version_type = None

        assert str(version) == "1.0.0"


@pytest.mark.unit
def test_repr_names_fields() -> None:
    text = repr(Version(1, 2, 3).with_build(4))

    assert text.startswith("Version(")
    assert "major=1" in text
    assert "build=4" in text
