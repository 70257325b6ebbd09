"""Unit tests for the total order on :class:`simple_version.version.Version`.

The ``tagged_ladder`` fixture (see ``conftest.py``) lists versions in strictly
ascending order; the property tests below check every pair of it.
"""

from __future__ import annotations

import itertools

import pytest

from simple_version import Version


@pytest.mark.unit
class TestBuildNumberOrdering:
    """Untagged versions: numeric triple, then build presence, then build value."""

    def test_basic_compare(self) -> None:
        assert Version(1, 999, 0) < Version(2, 0, 0)

    def test_minor_and_patch_compare_numerically(self) -> None:
        assert Version(1, 2, 10) > Version(1, 2, 9)
        assert Version(1, 10, 0) > Version(1, 9, 99)

    def test_build_num_compare(self) -> None:
        assert Version(1, 0, 0).with_build(1) < Version(1, 0, 0).with_build(2)

    def test_mixed_compare(self) -> None:
        assert Version(1, 0, 0) < Version(1, 0, 0).with_build(1)

    def test_absent_build_below_build_zero(self) -> None:
        assert Version(1, 0, 0) < Version(1, 0, 0).with_build(0)

    def test_triple_dominates_build(self) -> None:
        assert Version(1, 0, 0).with_build(1000) < Version(1, 0, 1)

    def test_equal(self) -> None:
        assert Version(1, 2, 3).with_build(4) == Version(1, 2, 3).with_build(4)
        assert Version(1, 2, 3) != Version(1, 2, 3).with_build(4)


@pytest.mark.unit
class TestQualifierOrdering:
    """Tagged versions: release > beta > alpha, then qualifier number."""

    def test_release_beta_alpha(self) -> None:
        release = Version(1, 0, 0).release()
        beta = Version(1, 0, 0).beta(1)
        alpha = Version(1, 0, 0).alpha(1)

        assert release > beta > alpha

    def test_release_outranks_any_beta_number(self) -> None:
        assert Version(1, 0, 0).release() > Version(1, 0, 0).beta(10_000)

    def test_beta_outranks_alpha_regardless_of_number(self) -> None:
        assert Version(1, 0, 0).beta(0) > Version(1, 0, 0).alpha(99)

    def test_same_stage_compares_number(self) -> None:
        assert Version(1, 0, 0).beta(2) > Version(1, 0, 0).beta(1)
        assert Version(1, 0, 0).alpha(0) < Version(1, 0, 0).alpha(1)

    def test_triple_dominates_qualifier(self) -> None:
        assert Version(1, 0, 0).release() < Version(1, 0, 1).alpha(0)

    def test_equal_releases(self) -> None:
        assert Version(1, 0, 0).release() == Version(1, 0, 0).release()

    def test_equal_stage_and_number(self) -> None:
        assert Version(1, 0, 0).beta(3) == Version(1, 0, 0).beta(3)
        assert Version(1, 0, 0).beta(3) != Version(1, 0, 0).alpha(3)

    def test_untagged_equals_release(self) -> None:
        assert Version(1, 0, 0) == Version(1, 0, 0).release()
        assert Version(1, 0, 0) > Version(1, 0, 0).beta(5)

    def test_qualifier_before_build(self) -> None:
        assert Version(1, 0, 0).beta(1).with_build(99) < Version(1, 0, 0).release()


@pytest.mark.unit
class TestTotalOrder:
    """Order properties over the ascending ladder fixture."""

    def test_ladder_is_strictly_ascending(self, tagged_ladder: list[Version]) -> None:
        for low, high in itertools.pairwise(tagged_ladder):
            assert low < high, f"{low} should sort below {high}"

    def test_irreflexive(self, tagged_ladder: list[Version]) -> None:
        for version in tagged_ladder:
            assert not version < version
            assert version == version
            assert version <= version

    def test_antisymmetric_and_total(self, tagged_ladder: list[Version]) -> None:
        for (i, a), (j, b) in itertools.product(enumerate(tagged_ladder), repeat=2):
            outcomes = [a < b, a == b, a > b]
            assert outcomes.count(True) == 1
            assert (a < b) == (i < j)
            assert (a == b) == (i == j)

    def test_transitive(self, tagged_ladder: list[Version]) -> None:
        for a, b, c in itertools.combinations(tagged_ladder, 3):
            assert a < b and b < c and a < c

    def test_sorted_recovers_ladder(self, tagged_ladder: list[Version]) -> None:
        shuffled = list(reversed(tagged_ladder))
        shuffled = shuffled[::2] + shuffled[1::2]

        assert [str(v) for v in sorted(shuffled)] == [str(v) for v in tagged_ladder]

    def test_max_and_min(self, tagged_ladder: list[Version]) -> None:
        assert max(tagged_ladder) is tagged_ladder[-1]
        assert min(tagged_ladder) is tagged_ladder[0]


@pytest.mark.unit
class TestForeignComparison:
    """Comparing with non-Version values defers to Python's defaults."""

    def test_not_equal_to_tuple(self) -> None:
        assert Version(1, 2, 3) != (1, 2, 3)

    def test_ordering_against_other_type_raises(self) -> None:
        with pytest.raises(TypeError):
            Version(1, 2, 3) < "1.2.3"  # noqa: B015
