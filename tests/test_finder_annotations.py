from api_type_mapper.mapping.base import (
    Annotation,
    AnnotationNameMapping,
    AnnotationTypeMapping,
    EndpointTypeMapping,
    ExtensionMapping,
)
from api_type_mapper.mapping.finder import MappingFinder
from api_type_mapper.mapping.schema import HttpMethod


def _type_annotation(source: str, fmt: str | None, annotation: str) -> AnnotationTypeMapping:
    return AnnotationTypeMapping(source_type_name=source, source_type_format=fmt, annotation=Annotation(type=annotation))


def _name_annotation(name: str, annotation: str) -> AnnotationNameMapping:
    return AnnotationNameMapping(parameter_name=name, annotation=Annotation(type=annotation))


class TestTypeAnnotations:
    def test_type_annotation(self):
        finder = MappingFinder([_type_annotation("Foo", None, "annotation.Bar")])
        mapping = finder.find_type_annotations("Foo")

        assert len(mapping) == 1
        assert mapping[0].source_type_name == "Foo"

    def test_object_annotation_of_model_type(self):
        finder = MappingFinder([_type_annotation("object", None, "annotation.Bar")])
        mapping = finder.find_type_annotations("Foo", allow_object=True)

        assert len(mapping) == 1
        assert mapping[0].source_type_name == "object"

    def test_ignore_object_annotation_of_non_model_types(self):
        finder = MappingFinder([_type_annotation("object", None, "annotation.Bar")])

        assert finder.find_type_annotations("String") == []
        assert finder.find_type_annotations("String[]") == []

    def test_type_format_annotation(self):
        finder = MappingFinder([_type_annotation("string", "uuid", "annotation.Foo")])
        mapping = finder.find_type_annotations("string:uuid")

        assert len(mapping) == 1
        assert mapping[0].source_type_name == "string"
        assert mapping[0].source_type_format == "uuid"

    def test_type_annotation_requires_format_match(self):
        finder = MappingFinder([_type_annotation("string", "uuid", "annotation.Foo")])

        assert finder.find_type_annotations("string") == []

    def test_returns_all_matches(self):
        finder = MappingFinder([
            _type_annotation("Foo", None, "annotation.A"),
            _type_annotation("Foo", None, "annotation.B"),
        ])

        assert [m.annotation.type for m in finder.find_type_annotations("Foo")] == ["annotation.A", "annotation.B"]


class TestParameterAnnotations:
    def test_parameter_annotation(self):
        finder = MappingFinder([_type_annotation("Foo", None, "annotation.Bar")])
        mapping = finder.find_parameter_annotations("/any", None, "Foo")

        assert len(mapping) == 1
        assert mapping[0].source_type_name == "Foo"

    def test_parameter_type_format_annotation(self):
        finder = MappingFinder([_type_annotation("string", "uuid", "annotation.Foo")])
        mapping = finder.find_parameter_annotations("/any", None, "string:uuid")

        assert len(mapping) == 1
        assert mapping[0].source_type_format == "uuid"

    def test_global_and_endpoint_annotations(self):
        finder = MappingFinder([
            _type_annotation("Foo", None, "annotation.Global"),
            EndpointTypeMapping(path="/foo", method=HttpMethod.GET, type_mappings=[
                _type_annotation("Foo", None, "annotation.Endpoint"),
            ]),
        ])

        get = finder.find_parameter_annotations("/foo", HttpMethod.GET, "Foo")
        post = finder.find_parameter_annotations("/foo", HttpMethod.POST, "Foo")

        assert [m.annotation.type for m in get] == ["annotation.Global", "annotation.Endpoint"]
        assert [m.annotation.type for m in post] == ["annotation.Global"]

    def test_parameter_name_annotations(self):
        finder = MappingFinder([
            _name_annotation("foo", "annotation.Global"),
            _name_annotation("bar", "annotation.Other"),
            EndpointTypeMapping(path="/foo", type_mappings=[
                _name_annotation("foo", "annotation.Endpoint"),
            ]),
        ])
        mapping = finder.find_parameter_name_annotations("/foo", HttpMethod.GET, "foo")

        assert [m.annotation.type for m in mapping] == ["annotation.Global", "annotation.Endpoint"]


class TestExtensionAnnotations:
    def test_extension_value_annotation(self):
        finder = MappingFinder([
            ExtensionMapping(extension="x-foo", type_mappings=[
                _name_annotation("foo", "annotation.Foo"),
                _name_annotation("bar", "annotation.Bar"),
            ]),
            ExtensionMapping(extension="x-bar", type_mappings=[
                _name_annotation("foo", "annotation.Other"),
            ]),
        ])
        mapping = finder.find_extension_annotations("x-foo", "foo")

        assert [m.annotation.type for m in mapping] == ["annotation.Foo"]

    def test_unknown_extension(self):
        finder = MappingFinder([
            ExtensionMapping(extension="x-foo", type_mappings=[_name_annotation("foo", "annotation.Foo")]),
        ])

        assert finder.find_extension_annotations("x-bar", "foo") == []
