"""Tests for identifier case helpers and type name validation."""

import pytest

from go_dataclass.codegen.core.generator import InvalidTypeName
from go_dataclass.codegen.core.naming import (
    capitalize,
    decapitalize,
    is_public,
    validate_type_name,
)


class TestCaseConversion:
    """Test capitalize and decapitalize."""

    def test_capitalize_upper_cases_first_character_only(self):
        assert capitalize("oneField") == "OneField"
        assert capitalize("x") == "X"
        assert capitalize("already") == "Already"

    def test_decapitalize_lower_cases_first_character_only(self):
        assert decapitalize("OneField") == "oneField"
        assert decapitalize("URL") == "uRL"
        assert decapitalize("V") == "v"

    def test_conversions_leave_non_letters_unchanged(self):
        assert capitalize("_x") == "_x"
        assert decapitalize("9Lives") == "9Lives"

    @pytest.mark.parametrize("func", [capitalize, decapitalize])
    def test_empty_input_is_rejected(self, func):
        with pytest.raises(ValueError):
            func("")

    @pytest.mark.parametrize(
        "name", ["A", "OneField", "URL", "HTTPServer", "Id2", "Émile"]
    )
    def test_capitalize_undoes_decapitalize_for_public_names(self, name):
        assert capitalize(decapitalize(name)) == name


class TestIsPublic:
    """Test exported identifier detection."""

    @pytest.mark.parametrize("name", ["A", "OneType", "X1", "Ünicode"])
    def test_upper_case_first_character_is_public(self, name):
        assert is_public(name)

    @pytest.mark.parametrize("name", ["", "a", "oneType", "_Hidden", "1Type"])
    def test_other_names_are_not_public(self, name):
        assert not is_public(name)


class TestValidateTypeName:
    """Test the interface name check done before generation."""

    def test_public_name_is_returned_unchanged(self):
        assert validate_type_name("OneType") == "OneType"

    def test_empty_name_must_be_set(self):
        with pytest.raises(InvalidTypeName, match="type must be set"):
            validate_type_name("")

    def test_private_name_is_rejected_with_name_in_message(self):
        with pytest.raises(InvalidTypeName) as exc_info:
            validate_type_name("oneType")

        assert str(exc_info.value) == "type must be public: oneType"
        assert exc_info.value.name == "oneType"
