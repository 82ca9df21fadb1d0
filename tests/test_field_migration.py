"""Unit tests for merging stored fields into a new configuration."""

from tasktriage.fields import merge_with_config, defaults_for, serialize
from tasktriage.models import FieldConfig, FieldType


class TestMergeWithConfig:
    """Test moving a task's fields to another bucket's schema."""

    def test_carries_existing_values(self, stage_configs):
        """Values of keys in the new schema are kept as stored."""
        merged = merge_with_config("approved=true||qty=7||notes=ok", stage_configs)
        assert merged == {"approved": "true", "qty": "7", "size": "", "notes": "ok"}

    def test_drops_unknown_keys(self, stage_configs):
        """Keys the new schema does not declare are dropped."""
        merged = merge_with_config("legacy=1||approved=false", stage_configs)
        assert "legacy" not in merged
        assert set(merged) == {c.key for c in stage_configs}

    def test_keeps_stored_values_even_if_invalid(self):
        """Merging does not validate; a stored blank stays blank."""
        configs = [FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER)]
        assert merge_with_config("qty=", configs) == {"qty": ""}

    def test_key_set_matches_schema(self, stage_configs):
        """The result has exactly the new schema's keys whatever the input."""
        for old in [None, "", "x=1||y=2", "approved=true||size=S||extra=z", "broken||=="]:
            assert set(merge_with_config(old, stage_configs)) == {c.key for c in stage_configs}

    def test_empty_schema(self):
        """A bucket without custom fields leaves nothing."""
        assert merge_with_config("qty=1", []) == {}

    def test_merged_values_encode(self, stage_configs):
        """The merged mapping encodes back to a field string."""
        merged = merge_with_config("approved=true", stage_configs)
        assert serialize(merged) == "approved=true||qty=0||size=||notes="


class TestDefaultsFor:
    """Test initial values for new tasks."""

    def test_defaults(self, stage_configs):
        """New tasks start from the type defaults."""
        assert defaults_for(stage_configs) == {
            "approved": "false",
            "qty": "0",
            "size": "",
            "notes": "",
        }
