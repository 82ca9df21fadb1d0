"""Unit tests for custom field validation, defaults and display."""

import pytest

from tasktriage.fields import validate, default_for, value_for_display, EMPTY_DISPLAY
from tasktriage.models import FieldConfig, FieldType


class TestValidate:
    """Test validating field values against a bucket configuration."""

    def test_required_missing(self):
        """A missing required field is reported by label."""
        configs = [FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER, required=True)]
        result = validate({}, configs)
        assert result.valid is False
        assert result.errors == ['Field "Quantity" is required']

    def test_required_blank(self):
        """Whitespace-only values count as missing."""
        configs = [FieldConfig(key="notes", label="Notes", required=True)]
        result = validate({"notes": "   "}, configs)
        assert result.errors == ['Field "Notes" is required']

    def test_all_valid(self, stage_configs):
        """Well-typed values for every field pass."""
        values = {"approved": "true", "qty": "12.5", "size": "M", "notes": "anything = goes"}
        result = validate(values, stage_configs)
        assert result.valid is True
        assert result.errors == []

    def test_optional_fields_may_be_missing(self, stage_configs):
        """Only required fields must be present."""
        assert validate({"approved": "false"}, stage_configs).valid

    @pytest.mark.parametrize("value", ["abc", "12abc", "nan", "inf", "-Infinity"])
    def test_number_rejects_non_finite(self, value):
        """Numbers must parse and be finite."""
        configs = [FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER)]
        result = validate({"qty": value}, configs)
        assert result.errors == ['Field "Quantity" must be a number']

    @pytest.mark.parametrize("value", ["0", "-3", "1e3", " 42 ", "0.25", "+.5", "7.", "0x10", "0b101", "0O17"])
    def test_number_accepts_numbers(self, value):
        """Integers, decimals, exponents and prefixed integers are numbers."""
        configs = [FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER)]
        assert validate({"qty": value}, configs).valid

    @pytest.mark.parametrize("value", ["1_000", "١٢", "0x1_0", "-0x10", "0x", "1e", "1e999", "0x" + "f" * 300])
    def test_number_grammar_is_strict(self, value):
        """Underscores, non-ASCII digits and overflowing values are not numbers."""
        configs = [FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER)]
        result = validate({"qty": value}, configs)
        assert result.errors == ['Field "Quantity" must be a number']

    @pytest.mark.parametrize("value", ["True", "yes", "1", "on"])
    def test_checkbox_literals_only(self, value):
        """Checkboxes accept exactly "true" and "false"."""
        configs = [FieldConfig(key="approved", label="Client Approval", type=FieldType.CHECKBOX)]
        result = validate({"approved": value}, configs)
        assert result.errors == ['Field "Client Approval" must be a checkbox (true/false)']

    def test_list_membership(self):
        """List values must be one of the options."""
        configs = [FieldConfig(key="size", label="Size", type=FieldType.LIST, options=["S", "M", "L"])]
        assert validate({"size": "L"}, configs).valid
        result = validate({"size": "XL"}, configs)
        assert result.errors == ['Field "Size" must be one of: S, M, L']

    def test_list_without_options(self):
        """A list field without options accepts any value."""
        configs = [FieldConfig(key="size", label="Size", type=FieldType.LIST)]
        assert validate({"size": "XL"}, configs).valid

    def test_errors_follow_config_order(self, stage_configs):
        """One message per failing config, in declaration order."""
        values = {"qty": "many", "size": "XXL"}
        result = validate(values, stage_configs)
        assert result.errors == [
            'Field "Client Approval" is required',
            'Field "Quantity" must be a number',
            'Field "Size" must be one of: S, M, L',
        ]

    def test_undeclared_keys_pass_through(self):
        """Keys no config declares are not validated."""
        configs = [FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER)]
        assert validate({"qty": "1", "legacy": "???"}, configs).valid

    def test_no_configs(self):
        """Without configuration everything is valid."""
        assert validate({"anything": "x"}, []).valid


class TestDefaults:
    """Test default values per field type."""

    def test_defaults(self):
        """Each type starts from its own default."""
        assert default_for(FieldType.CHECKBOX) == "false"
        assert default_for(FieldType.NUMBER) == "0"
        assert default_for(FieldType.TEXT) == ""
        assert default_for(FieldType.LIST) == ""

    def test_string_types(self):
        """Type names are accepted as well as enum members."""
        assert default_for("checkbox") == "false"
        assert default_for("unknown") == ""


class TestValueForDisplay:
    """Test formatting stored values for reports."""

    def test_missing(self):
        """Missing and blank values show the em dash."""
        config = FieldConfig(key="notes", label="Notes")
        assert value_for_display(None, config) == EMPTY_DISPLAY
        assert value_for_display("  ", config) == "—"

    def test_checkbox(self):
        """Checkbox values show as Yes/No."""
        config = FieldConfig(key="approved", label="Approved", type=FieldType.CHECKBOX)
        assert value_for_display("true", config) == "Yes"
        assert value_for_display("false", config) == "No"

    def test_other_types_unchanged(self):
        """Other values are shown as stored."""
        config = FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER)
        assert value_for_display("12", config) == "12"
