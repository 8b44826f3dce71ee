"""
Unit Tests for Manifest Models

Tests for PageSize, Page and Manifest.
"""

import pytest

from folio_layout.core.models import Manifest, Page, PageSize


class TestPageSize:
    """Tests for PageSize dataclass."""

    def test_init_when_negative_width_then_raises_error(self):
        """Negative width should raise ValueError."""
        with pytest.raises(ValueError, match="width must be >= 0"):
            PageSize(width=-1, height=10)

    def test_init_when_fractional_then_keeps_value(self):
        """Fractional sizes are kept as declared."""
        assert PageSize(100.75, 200.25).width == 100.75


class TestPage:
    """Tests for Page dataclass."""

    def test_size_at_when_level_present_then_returns_size(self):
        page = Page(dimensions=(PageSize(10, 20), PageSize(20, 40)))
        assert page.size_at(1) == PageSize(20, 40)

    def test_size_at_when_level_missing_then_returns_none(self):
        page = Page(dimensions=(PageSize(10, 20),))
        assert page.size_at(1) is None
        assert page.size_at(-1) is None

    def test_from_dict_when_flags_omitted_then_defaults(self):
        """Pages are paged and unlabelled unless stated."""
        page = Page.from_dict({"dimensions": [{"width": 1, "height": 2}]})
        assert page.paged is True
        assert page.label is None

    def test_to_dict_when_labelled_then_includes_label(self):
        page = Page(dimensions=(PageSize(1, 2),), paged=False, label="cover")
        assert page.to_dict() == {
            "paged": False,
            "dimensions": [{"width": 1, "height": 2}],
            "label": "cover",
        }


class TestManifest:
    """Tests for Manifest dataclass."""

    def test_zoom_levels_when_pages_differ_then_uses_minimum(self):
        manifest = Manifest(pages=(
            Page(dimensions=(PageSize(1, 1), PageSize(2, 2), PageSize(4, 4))),
            Page(dimensions=(PageSize(1, 1), PageSize(2, 2))),
        ))
        assert manifest.zoom_levels == 2
        assert manifest.max_zoom_level == 1

    def test_zoom_levels_when_empty_then_zero(self):
        manifest = Manifest()
        assert manifest.page_count == 0
        assert manifest.zoom_levels == 0
        assert manifest.max_zoom_level is None

    def test_from_dict_when_valid_then_builds_pages_in_order(self, manifest_data):
        manifest = Manifest.from_dict(manifest_data)
        assert manifest.paged is True
        assert manifest.page_count == 3
        assert [p.label for p in manifest.pages] == ["cover", "1r", "1v"]
        assert manifest.pages[0].paged is False

    def test_from_dict_when_paged_omitted_then_false(self):
        assert Manifest.from_dict({"pages": []}).paged is False
