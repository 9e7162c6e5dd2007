"""Tests for the class and spec catalogue."""

import pytest

from encounterstats.core.classes import (
    CLASS_MAP,
    FALLBACK_COLOR,
    class_id_from_spec,
    class_info,
    class_role,
    is_displayable_spec,
)


class TestClassIdFromSpec:
    """Spec to class mapping."""

    @pytest.mark.parametrize(
        "spec_id,class_id",
        [(1, 1), (2, 1), (3, 2), (4, 2), (5, 4), (6, 4), (7, 5), (8, 5),
         (9, 9), (10, 9), (11, 11), (12, 11), (13, 12), (14, 12), (15, 13), (16, 13)],
    )
    def test_spec_pairs(self, spec_id, class_id):
        """Each spec pair maps to its class."""
        assert class_id_from_spec(spec_id) == class_id

    @pytest.mark.parametrize("spec_id", [-1, 0, 17, 100])
    def test_unmapped_specs(self, spec_id):
        """Specs outside 1..16 have no class."""
        assert class_id_from_spec(spec_id) is None

    def test_every_mapped_class_is_named(self):
        """Every class id reached from a spec has a name."""
        for spec_id in range(1, 17):
            assert class_id_from_spec(spec_id) in CLASS_MAP


class TestClassInfo:
    """Display mapping."""

    def test_mapped_spec(self):
        """A mapped spec resolves name, class and colour."""
        info = class_info(8)
        assert info.name == "Lifebind"
        assert info.class_name == "Verdant Oracle"
        assert info.color == "#66aa00"
        assert info.has_valid_mapping is True
        assert info.role == "healer"

    def test_sentinel_uses_fallback(self):
        """Spec -1 falls back to the default colour."""
        info = class_info(-1)
        assert info.name is None
        assert info.class_name == ""
        assert info.color == FALLBACK_COLOR
        assert info.has_valid_mapping is False

    def test_unknown_spec_zero_has_name_but_no_class(self):
        """Spec 0 has a name but no class."""
        info = class_info(0)
        assert info.name == "Unknown"
        assert info.has_valid_mapping is False


class TestClassRole:
    """Spec roles."""

    @pytest.mark.parametrize(
        "spec_id,role",
        [(1, "damage"), (7, "damagehealer"), (8, "healer"), (9, "tank"),
         (16, "healer"), (15, "damagehealer"), (14, "tank"), (99, "damage")],
    )
    def test_roles(self, spec_id, role):
        """Specs map to their combat role."""
        assert class_role(spec_id) == role


class TestIsDisplayableSpec:
    """Distribution view eligibility."""

    def test_sentinel_not_displayable(self):
        """Spec -1 is never displayed."""
        assert is_displayable_spec(-1) is False

    def test_unmapped_not_displayable(self):
        """Specs without a name are not displayed."""
        assert is_displayable_spec(17) is False

    def test_mapped_displayable(self):
        """Named specs, including 0, are displayed."""
        assert is_displayable_spec(0) is True
        assert is_displayable_spec(16) is True
