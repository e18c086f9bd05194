"""Unit tests for extraction result models."""

import pytest
from pydantic import ValidationError

from mockgen_core.models import EmbeddedRef, ImportEntry, Method, TypeData, TypeRef


class TestTypeRef:
    def test_full_type_name_with_qualifier(self):
        assert TypeRef(qualifier="io", base_name="Reader").full_type_name == "io.Reader"

    def test_full_type_name_without_qualifier(self):
        assert TypeRef(base_name="[]byte").full_type_name == "[]byte"

    def test_is_variadic(self):
        assert TypeRef(base_name="...string").is_variadic
        assert not TypeRef(base_name="[]string").is_variadic

    def test_empty_base_name_rejected(self):
        with pytest.raises(ValidationError):
            TypeRef(base_name="")

    def test_frozen(self):
        ref = TypeRef(base_name="int")
        with pytest.raises(ValidationError):
            ref.base_name = "string"


class TestMethod:
    def test_parameter_names_keep_declared_names(self):
        method = Method(
            name="Move",
            parameters=(
                TypeRef(base_name="int", declared_name="x"),
                TypeRef(base_name="int", declared_name="y"),
            ),
        )
        assert method.parameter_names() == ["x", "y"]

    def test_unnamed_and_blank_parameters_get_positional_names(self):
        method = Method(
            name="Do",
            parameters=(
                TypeRef(base_name="int"),
                TypeRef(base_name="string", declared_name="_"),
                TypeRef(base_name="bool", declared_name="ok"),
            ),
        )
        assert method.parameter_names() == ["param0", "param1", "ok"]

    def test_positional_names_avoid_declared_names(self):
        method = Method(
            name="Put",
            parameters=(
                TypeRef(base_name="int", declared_name="_"),
                TypeRef(base_name="string", declared_name="param0"),
                TypeRef(base_name="bool", declared_name="param0_1"),
            ),
        )
        names = method.parameter_names()

        assert names == ["param0_2", "param0", "param0_1"]
        assert len(set(names)) == len(names)

    def test_defaults_are_empty(self):
        method = Method(name="Close")
        assert method.parameters == ()
        assert method.returns == ()


class TestEmbeddedRef:
    def test_reference(self):
        assert EmbeddedRef(name="Writer", qualifier="io").reference == "io.Writer"
        assert EmbeddedRef(name="SecondInterface").reference == "SecondInterface"


class TestImportEntry:
    def test_short_name_is_last_path_segment(self):
        entry = ImportEntry(path="github.com/jamesrr39/go-mockgen-tool/example/extrapkg")
        assert entry.short_name == "extrapkg"

    def test_short_name_prefers_alias(self):
        assert ImportEntry(path="os", alias="osfs").short_name == "osfs"

    def test_versioned_path_keeps_last_segment(self):
        assert ImportEntry(path="gopkg.in/yaml.v2").short_name == "yaml.v2"


class TestTypeData:
    def test_lists_are_tuples(self):
        data = TypeData(
            package_name="example",
            methods=[Method(name="Name")],
            embeds=[EmbeddedRef(name="Stringer", qualifier="fmt")],
        )
        assert isinstance(data.methods, tuple)
        assert isinstance(data.embeds, tuple)
        assert data.imports == ()

    def test_package_name_required(self):
        with pytest.raises(ValidationError):
            TypeData(package_name="")
