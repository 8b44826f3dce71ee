"""
Unit tests for viewer configuration.
"""

import pytest

from folio_layout.layout import DocumentPadding, PagePadding, ViewerConfig


class TestViewerConfig:
    """Tests for ViewerConfig dataclass."""

    def test_init_when_defaults_then_vertical_singles(self):
        config = ViewerConfig()

        assert config.zoom_level == 0
        assert config.vertically_oriented is True
        assert config.in_book_layout is False
        assert config.page_padding == PagePadding(0, 0)
        assert config.document_padding == DocumentPadding(0, 0, 0, 0)

    def test_axes_when_horizontal_then_swapped(self):
        config = ViewerConfig(vertically_oriented=False)

        assert config.primary_axis == "horizontal"
        assert config.secondary_axis == "vertical"

    def test_init_when_negative_zoom_then_raises_error(self):
        with pytest.raises(ValueError, match="zoom_level must be >= 0"):
            ViewerConfig(zoom_level=-1)

    def test_padding_when_negative_then_raises_error(self):
        with pytest.raises(ValueError, match="left padding must be >= 0"):
            DocumentPadding(left=-2)

    def test_from_dict_when_nested_padding_then_builds_config(self):
        config = ViewerConfig.from_dict({
            "zoom_level": 2,
            "in_book_layout": True,
            "page_padding": {"top": 10, "left": 4},
            "document_padding": {"top": 1, "right": 2, "bottom": 3, "left": 4},
        })

        assert config.zoom_level == 2
        assert config.page_padding == PagePadding(top=10, left=4)
        assert config.document_padding.bottom == 3

    def test_from_dict_when_unknown_key_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            ViewerConfig.from_dict({"zoom": 2})

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"zoom_level": "1"}, "zoom_level must be an integer"),
            ({"zoom_level": 0.5}, "zoom_level must be an integer"),
            ({"zoom_level": True}, "zoom_level must be an integer"),
            ({"in_book_layout": "false"}, "in_book_layout must be a boolean"),
            ({"vertically_oriented": 1}, "vertically_oriented must be a boolean"),
            ({"page_padding": 5}, "page_padding must be a PagePadding"),
            ({"document_padding": [1, 2, 3, 4]}, "document_padding must be a DocumentPadding"),
            ({"page_padding": {"top": "8"}}, "top padding must be a number"),
        ],
    )
    def test_from_dict_when_wrong_type_then_raises_error(self, data, message):
        with pytest.raises(ValueError, match=message):
            ViewerConfig.from_dict(data)

    def test_from_dict_when_not_mapping_then_raises_error(self):
        with pytest.raises(ValueError, match="Config must be a mapping"):
            ViewerConfig.from_dict([("zoom_level", 1)])

    def test_from_dict_when_unknown_padding_key_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown PagePadding keys"):
            ViewerConfig.from_dict({"page_padding": {"bottom": 3}})
