import pytest

from api_type_mapper.mapping.base import EndpointTypeMapping, TypeMapping
from api_type_mapper.mapping.errors import AmbiguousTypeMappingError
from api_type_mapper.mapping.finder import MappingFinder
from api_type_mapper.mapping.schema import HttpMethod, SchemaInfo


def _multi(target: str) -> TypeMapping:
    return TypeMapping(source_type_name="multi", target_type_name=target)


class TestExcludedEndpoint:
    def test_endpoint_method_exclude(self):
        finder = MappingFinder([
            EndpointTypeMapping(path="/foo"),
            EndpointTypeMapping(path="/foo", method=HttpMethod.GET, exclude=True),
        ])

        assert finder.is_excluded_endpoint("/foo", HttpMethod.GET) is True

    def test_endpoint_exclude(self):
        finder = MappingFinder([EndpointTypeMapping(path="/foo", exclude=True)])

        assert finder.is_excluded_endpoint("/foo", HttpMethod.GET) is True

    def test_exclude_if_any_is_true(self):
        finder = MappingFinder([
            EndpointTypeMapping(path="/foo", exclude=True),
            EndpointTypeMapping(path="/foo", method=HttpMethod.GET, exclude=False),
        ])

        assert finder.is_excluded_endpoint("/foo", HttpMethod.GET) is True

    def test_exclude_ignores_method(self):
        finder = MappingFinder([
            EndpointTypeMapping(path="/foo", method=HttpMethod.POST, exclude=True),
        ])

        assert finder.is_excluded_endpoint("/foo", HttpMethod.GET) is True
        assert finder.is_excluded_endpoint("/foo") is True

    def test_not_excluded(self):
        finder = MappingFinder([EndpointTypeMapping(path="/foo")])

        assert finder.is_excluded_endpoint("/foo") is False

    def test_no_endpoint(self):
        finder = MappingFinder([EndpointTypeMapping(path="/bar", exclude=True)])

        assert finder.is_excluded_endpoint("/foo", HttpMethod.GET) is False

    def test_duplicate_endpoint_is_ambiguous(self):
        finder = MappingFinder([
            EndpointTypeMapping(path="/foo", exclude=True),
            EndpointTypeMapping(path="/foo", exclude=False),
        ])

        with pytest.raises(AmbiguousTypeMappingError) as e:
            finder.is_excluded_endpoint("/foo")

        assert len(e.value.mappings) == 2


class TestDeprecatedMultiMapping:
    def test_global_multi_mapping(self):
        finder = MappingFinder([
            _multi("pkg.A"),
            TypeMapping(source_type_name="Foo", target_type_name="pkg.Foo"),
            _multi("pkg.B"),
        ])

        with pytest.deprecated_call():
            result = finder.find_multi_mapping(SchemaInfo(path="/foo"))

        assert [m.target_type_name for m in result] == ["pkg.A", "pkg.B"]

    def test_global_multi_mapping_agrees_with_current_query(self):
        finder = MappingFinder([_multi("pkg.A"), _multi("pkg.B")])

        with pytest.deprecated_call():
            result = finder.find_multi_mapping(SchemaInfo(path="/foo"))

        assert result[0] == finder.find_multi_type_mapping()

    def test_endpoint_multi_mapping_ignores_method(self):
        finder = MappingFinder([
            EndpointTypeMapping(path="/foo", method=HttpMethod.POST, type_mappings=[_multi("pkg.Post")]),
            EndpointTypeMapping(path="/bar", type_mappings=[_multi("pkg.Bar")]),
        ])

        with pytest.deprecated_call():
            result = finder.find_endpoint_multi_mapping(SchemaInfo(path="/foo", method=HttpMethod.GET))

        assert [m.target_type_name for m in result] == ["pkg.Post"]

    def test_endpoint_multi_mapping_agrees_with_current_query(self):
        finder = MappingFinder([
            EndpointTypeMapping(path="/foo", type_mappings=[_multi("pkg.Flux")]),
        ])
        info = SchemaInfo(path="/foo", method=HttpMethod.GET)

        with pytest.deprecated_call():
            result = finder.find_endpoint_multi_mapping(info)

        assert result == [finder.find_endpoint_multi_type_mapping(info)]

    def test_no_multi_mapping(self):
        finder = MappingFinder([EndpointTypeMapping(path="/foo")])

        with pytest.deprecated_call():
            assert finder.find_endpoint_multi_mapping(SchemaInfo(path="/foo")) == []
        with pytest.deprecated_call():
            assert finder.find_multi_mapping(SchemaInfo(path="/foo")) == []
