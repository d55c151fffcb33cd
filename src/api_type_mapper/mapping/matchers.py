"""Mapping matchers.

A matcher is a predicate over one rule kind: ``kind`` names the rule class
it applies to and calling it decides if a rule of that kind matches. The
finder drops rules of any other kind before it calls the matcher.
"""

from .base import (
    MULTI,
    NULL,
    SINGLE,
    AddParameterTypeMapping,
    AnnotationNameMapping,
    AnnotationTypeMapping,
    ContentTypeMapping,
    EndpointTypeMapping,
    ExtensionMapping,
    NameTypeMapping,
    NullTypeMapping,
    ResultStyleOptionMapping,
    ResultTypeMapping,
    TypeMapping,
)
from .schema import HttpMethod, SchemaInfo

RESERVED_TYPE_NAMES = frozenset({SINGLE, MULTI, NULL})


def is_single_marker(mapping) -> bool:
    return isinstance(mapping, TypeMapping) and mapping.source_type_name == SINGLE


def is_multi_marker(mapping) -> bool:
    return isinstance(mapping, TypeMapping) and mapping.source_type_name == MULTI


def is_null_marker(mapping) -> bool:
    return isinstance(mapping, NullTypeMapping) and mapping.source_type_name == NULL


class EndpointTypeMatcher:
    """Endpoint rules of the path that apply to the method.

    A rule without method applies to all methods of its path, so a method
    specific and a method-less rule of the same path both match.
    """

    kind = EndpointTypeMapping

    def __init__(self, path: str, method: HttpMethod | None = None):
        self.path = path
        self.method = method

    def __call__(self, mapping: EndpointTypeMapping) -> bool:
        if mapping.path != self.path:
            return False
        return mapping.method is None or mapping.method == self.method


class EndpointPathMatcher:
    """Endpoint rules of the path, ignoring the method (legacy)."""

    kind = EndpointTypeMapping

    def __init__(self, path: str):
        self.path = path

    def __call__(self, mapping: EndpointTypeMapping) -> bool:
        return mapping.path == self.path


class ParameterTypeMatcher:
    kind = NameTypeMapping

    def __init__(self, info: SchemaInfo):
        self.info = info

    def __call__(self, mapping: NameTypeMapping) -> bool:
        return mapping.parameter_name == self.info.name


class ResponseTypeMatcher:
    kind = ContentTypeMapping

    def __init__(self, info: SchemaInfo):
        self.info = info

    def __call__(self, mapping: ContentTypeMapping) -> bool:
        return mapping.content_type == self.info.content_type


class TypeMatcher:
    """Plain type mappings of the schema.

    Primitive schemas match by ``type`` and ``format`` (a mapping without
    format only matches a schema without format), arrays match ``array``
    and everything else matches by schema name.
    """

    kind = TypeMapping

    def __init__(self, info: SchemaInfo):
        self.info = info

    def __call__(self, mapping: TypeMapping) -> bool:
        if mapping.source_type_name in RESERVED_TYPE_NAMES:
            return False

        if self.info.primitive:
            return (
                mapping.source_type_name == self.info.type
                and mapping.source_type_format == self.info.format
            )

        if self.info.array:
            return mapping.source_type_name == "array"

        return mapping.source_type_name == self.info.name


class SingleTypeMatcher:
    kind = TypeMapping

    def __call__(self, mapping: TypeMapping) -> bool:
        return is_single_marker(mapping)


class MultiTypeMatcher:
    kind = TypeMapping

    def __call__(self, mapping: TypeMapping) -> bool:
        return is_multi_marker(mapping)


class NullTypeMatcher:
    kind = NullTypeMapping

    def __call__(self, mapping: NullTypeMapping) -> bool:
        return is_null_marker(mapping)


class AddParameterTypeMatcher:
    kind = AddParameterTypeMapping

    def __call__(self, mapping: AddParameterTypeMapping) -> bool:
        return True


class ResultTypeMatcher:
    kind = ResultTypeMapping

    def __call__(self, mapping: ResultTypeMapping) -> bool:
        return True


class ResultStyleMatcher:
    kind = ResultStyleOptionMapping

    def __call__(self, mapping: ResultStyleOptionMapping) -> bool:
        return True


class AnnotationTypeMatcher:
    """Annotation mappings of a type name, ``type`` or ``type:format``.

    With ``allow_object`` an ``object`` mapping matches too, which is how
    model types pick up the annotations of all objects.
    """

    kind = AnnotationTypeMapping

    def __init__(self, type_name: str, allow_object: bool = False):
        type_, _, format_ = type_name.partition(":")
        self.type = type_
        self.format = format_ or None
        self.allow_object = allow_object

    def __call__(self, mapping: AnnotationTypeMapping) -> bool:
        if self.allow_object and mapping.source_type_name == "object":
            return True

        return (
            mapping.source_type_name == self.type
            and mapping.source_type_format == self.format
        )


class AnnotationNameMatcher:
    kind = AnnotationNameMapping

    def __init__(self, name: str):
        self.name = name

    def __call__(self, mapping: AnnotationNameMapping) -> bool:
        return mapping.parameter_name == self.name


class ExtensionMatcher:
    kind = ExtensionMapping

    def __init__(self, extension: str):
        self.extension = extension

    def __call__(self, mapping: ExtensionMapping) -> bool:
        return mapping.extension == self.extension
