"""Tests for the Go dataclass generator and the convenience API."""

import pytest

from go_dataclass import generate_code, generate_dataclass
from go_dataclass.codegen import DataclassGenerator, GeneratorConfig
from go_dataclass.codegen.core.generator import (
    DuplicateFieldName,
    EmptyFieldList,
    InvalidTypeName,
)


ONE_TYPE = """\
type OneType interface {
\tOneField() int
}
type oneType struct {
\toneField int
}
func (s *oneType) OneField() int { return s.oneField }
func NewOneType(
\toneField int,
) OneType {
\treturn &oneType{
\t\toneField: oneField,
\t}
}
"""

TWO_TYPE = """\
type TwoType interface {
\tFirst() *http.Request
\tSecond() string
}
type twoType struct {
\tfirst *http.Request
\tsecond string
}
func (s *twoType) First() *http.Request { return s.first }
func (s *twoType) Second() string { return s.second }
func NewTwoType(
\tfirst *http.Request,
\tsecond string,
) TwoType {
\treturn &twoType{
\t\tfirst: first,
\t\tsecond: second,
\t}
}
"""


class TestDataclassGenerator:
    """Test declaration output for parsed fields."""

    def test_single_field(self):
        generator = DataclassGenerator("OneType")

        assert generator.render("OneField int") == ONE_TYPE

    def test_two_fields(self):
        generator = DataclassGenerator("TwoType")

        assert generator.render("First *http.Request|Second string") == TWO_TYPE

    def test_nested_composite_type(self):
        # Arrange
        fields = "Handlers map[string][]func(context.Context) (<-chan int, error)"

        # Act
        code = generate_dataclass("Router", fields)

        # Assert
        type_expr = "map[string][]func(context.Context) (<-chan int, error)"
        assert f"\tHandlers() {type_expr}\n" in code
        assert f"\thandlers {type_expr}\n" in code
        assert f"func (s *router) Handlers() {type_expr} {{ return s.handlers }}\n" in code
        assert f"\thandlers {type_expr},\n" in code

    def test_declaration_counts_match_field_count(self):
        code = generate_dataclass("Many", "A int|B string|C []byte|D chan int")

        assert code.count("type Many interface {") == 1
        assert code.count("type many struct {") == 1
        assert code.count("func (s *many) ") == 4
        assert code.count("func NewMany(") == 1
        assert code.count("\t\t") == 4

    def test_output_is_deterministic(self):
        fields = "First *http.Request|Second string"

        assert generate_dataclass("TwoType", fields) == generate_dataclass("TwoType", fields)

    def test_space_indentation(self):
        config = GeneratorConfig(use_tabs=False, indent_size=2)

        code = generate_dataclass("OneType", "OneField int", config)

        assert "\t" not in code
        assert "  OneField() int\n" in code
        assert "    oneField: oneField,\n" in code

    def test_type_text_is_not_escaped(self):
        code = generate_dataclass("Pipe", 'In <-chan string|Tag struct{ V int `json:"v"` }')

        assert "In() <-chan string\n" in code
        assert 'Tag() struct{ V int `json:"v"` }\n' in code

    def test_custom_separator_from_config(self):
        config = GeneratorConfig(field_separator=",")

        code = generate_dataclass("Pair", "Key string,Value int", config)

        assert "func NewPair(" in code
        assert "\tvalue int,\n" in code

    def test_template_override_from_config(self):
        config = GeneratorConfig(
            templates={"interface.go.j2": "// {{ name }} has {{ methods|length }} methods\n"}
        )

        code = generate_dataclass("OneType", "OneField int", config)

        assert code.startswith("// OneType has 1 methods\ntype oneType struct {\n")

    def test_generate_without_fields_fails(self):
        generator = DataclassGenerator("OneType")

        with pytest.raises(EmptyFieldList):
            generator.generate()

    def test_buffer_accumulates_header_and_declarations(self):
        # Arrange
        generator = DataclassGenerator("OneType")
        generator.parse_fields("OneField int")

        # Act
        generator.write_header("-type OneType -field OneField int", "main")
        generator.generate()

        # Assert
        assert generator.getvalue() == (
            '// Code generated by "dataclass -type OneType -field OneField int"; '
            "DO NOT EDIT.\n"
            "\n"
            "package main\n"
            "\n" + ONE_TYPE
        )
        assert generator.bytes() == generator.getvalue().encode("utf-8")

    def test_printf_formats_arguments(self):
        generator = DataclassGenerator("OneType")

        generator.printf("package %s\n", "models")
        generator.printf("100%\n")

        assert generator.getvalue() == "package models\n100%\n"

    def test_generator_metadata(self):
        generator = DataclassGenerator("OneType")

        assert generator.language_name == "go"
        assert generator.file_extension == ".go"
        assert generator.template_exists("struct.go.j2")
        assert not generator.template_exists("missing.go.j2")


class TestConvenienceApi:
    """Test generate_dataclass and generate_code."""

    @pytest.mark.parametrize("type_name", ["", "oneType"])
    def test_generate_dataclass_rejects_type_name(self, type_name):
        with pytest.raises(InvalidTypeName):
            generate_dataclass(type_name, "OneField int")

    def test_generate_code_success(self):
        result = generate_code("TwoType", "First *http.Request|Second string")

        assert result.success
        assert result.code == TWO_TYPE
        assert result.warnings == []
        assert result.metadata == {
            "language": "go",
            "file_extension": ".go",
            "type_name": "TwoType",
            "field_count": 2,
        }

    def test_generate_code_reports_parse_error(self):
        result = generate_code("OneType", "A int|A int")

        assert not result.success
        assert result.code == ""
        assert isinstance(result.exception, DuplicateFieldName)
        assert result.error_message == (
            "Code generation failed: invalid field duplicated name: A"
        )

    def test_generate_code_reports_type_name_error(self):
        result = generate_code("lower", "A int")

        assert not result.success
        assert isinstance(result.exception, InvalidTypeName)
        assert "type must be public: lower" in result.error_message

    def test_generate_code_carries_config_warnings(self):
        config = GeneratorConfig(use_tabs=False, indent_size=0)

        result = generate_code("OneType", "OneField int", config)

        assert result.success
        assert result.warnings == ["Invalid indent_size: 0"]
