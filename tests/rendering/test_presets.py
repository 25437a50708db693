"""Tests for named badge presets."""

import pytest
from pydantic import ValidationError

from sponsorsvg.rendering.presets import (
    BASE,
    MEDIUM,
    NONE,
    PRESETS,
    XL,
    get_preset,
)
from sponsorsvg.schemas import AvatarConfig, BadgePreset, NameLabelConfig

pytestmark = pytest.mark.unit


class TestPresets:
    """Tests for the preset registry."""

    def test_all_presets_registered(self):
        """Test every named preset is in the registry."""
        assert set(PRESETS) == {"none", "xs", "small", "base", "medium", "large", "xl"}

    def test_get_preset(self):
        """Test presets are looked up by name."""
        assert get_preset("xl") is XL

    def test_unknown_preset_lists_names(self):
        """Test unknown names raise KeyError listing the known ones."""
        with pytest.raises(KeyError, match="medium"):
            get_preset("huge")

    def test_only_larger_presets_have_labels(self):
        """Test only medium and larger presets show names."""
        labeled = {name for name, preset in PRESETS.items() if preset.name}
        assert labeled == {"medium", "large", "xl"}

    def test_avatar_fits_in_box(self):
        """Test every avatar fits inside its layout cell."""
        for preset in PRESETS.values():
            assert preset.avatar.size <= preset.box_width
            assert preset.avatar.size <= preset.box_height

    def test_side_padding(self):
        """Test side padding comes from the container config."""
        assert BASE.side_padding == 30
        assert MEDIUM.side_padding == 20
        assert NONE.side_padding == 0

    def test_side_padding_defaults_to_zero(self):
        """Test presets without a container have no side padding."""
        preset = BadgePreset(avatar=AvatarConfig(size=10), box_width=10, box_height=10)
        assert preset.side_padding == 0

    def test_presets_are_frozen(self):
        """Test presets cannot be mutated."""
        with pytest.raises(ValidationError):
            BASE.box_width = 1


class TestNameLabelConfig:
    """Tests for NameLabelConfig validation."""

    def test_max_length_below_ellipsis_rejected(self):
        """Test max_length shorter than the ellipsis is rejected."""
        with pytest.raises(ValidationError):
            NameLabelConfig(max_length=2)

    def test_defaults(self):
        """Test label config defaults to no truncation, class or color."""
        label = NameLabelConfig()
        assert label.max_length is None
        assert label.classes is None
        assert label.color is None
