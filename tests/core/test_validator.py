"""
Unit Tests for Manifest Schema Validation
"""

import pytest

from folio_layout.core.schemas import ValidationError, validate_manifest


class TestValidateManifest:
    """Tests for validate_manifest()."""

    def test_validate_when_valid_then_passes(self, manifest_data):
        validate_manifest(manifest_data)

    def test_validate_when_empty_pages_then_passes(self):
        """An empty document is valid."""
        validate_manifest({"pages": []})

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_manifest([])

    def test_validate_when_pages_missing_then_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_manifest({"paged": True})
        assert exc_info.value.errors == ["Missing field: pages"]

    def test_validate_when_negative_width_then_reports_path(self, manifest_data):
        manifest_data["pages"][1]["dimensions"][0]["width"] = -5

        with pytest.raises(ValidationError) as exc_info:
            validate_manifest(manifest_data)
        assert exc_info.value.path == "pages[1].dimensions[0].width"

    def test_validate_when_width_is_string_then_raises(self, manifest_data):
        manifest_data["pages"][0]["dimensions"][0]["width"] = "100"

        with pytest.raises(ValidationError, match="Invalid width"):
            validate_manifest(manifest_data)

    def test_validate_when_no_dimensions_then_raises(self, manifest_data):
        manifest_data["pages"][2]["dimensions"] = []

        with pytest.raises(ValidationError) as exc_info:
            validate_manifest(manifest_data)
        assert exc_info.value.path == "pages[2].dimensions"

    def test_validate_when_paged_not_bool_then_raises(self, manifest_data):
        manifest_data["paged"] = "yes"

        with pytest.raises(ValidationError, match="paged must be a boolean"):
            validate_manifest(manifest_data)

    def test_validate_when_label_not_string_and_strict_then_schema_rejects(self, manifest_data):
        """Basic checks ignore labels; the JSON Schema does not."""
        manifest_data["pages"][0]["label"] = 7

        validate_manifest(manifest_data, strict=False)
        with pytest.raises(ValidationError, match="Schema validation failed") as exc_info:
            validate_manifest(manifest_data, strict=True)
        assert exc_info.value.path == "pages.0.label"
