"""Mapping finder: resolves which type mapping rules apply to a schema.

All queries narrow the rule list with the same primitive: keep the rules of
the matcher's kind that satisfy the matcher, then replace each of them with
its child rules. Narrowing by an endpoint matcher yields the rules of that
endpoint, narrowing that result by a parameter matcher yields the type
mapping of the parameter, and so on.

The type mapping queries require a unique match and raise
AmbiguousTypeMappingError otherwise. The result/single/multi/null wrapper
queries return the first match.
"""

import logging
import warnings
from collections.abc import Iterable

from .base import (
    AddParameterTypeMapping,
    AnnotationNameMapping,
    AnnotationTypeMapping,
    EndpointTypeMapping,
    NullTypeMapping,
    ResultStyle,
    ResultTypeMapping,
    TypeMapping,
)
from .errors import AmbiguousTypeMappingError
from .matchers import (
    AddParameterTypeMatcher,
    AnnotationNameMatcher,
    AnnotationTypeMatcher,
    EndpointPathMatcher,
    EndpointTypeMatcher,
    ExtensionMatcher,
    MultiTypeMatcher,
    NullTypeMatcher,
    ParameterTypeMatcher,
    ResponseTypeMatcher,
    ResultStyleMatcher,
    ResultTypeMatcher,
    SingleTypeMatcher,
    TypeMatcher,
)
from .schema import HttpMethod, SchemaInfo

logger = logging.getLogger(__name__)


class MappingFinder:
    """Finds the mappings of a schema in the type mapping list.

    The list is read-only, a finder can be shared between threads.
    """

    def __init__(self, type_mappings: Iterable = ()):
        self.type_mappings = tuple(type_mappings)

    # -- type mappings (unique) -----------------------------------------------

    def find_endpoint_type_mapping(self, info: SchemaInfo) -> TypeMapping | None:
        """Find the endpoint type mapping of the schema.

        Tries parameter name, then content type, then type name.

        Raises:
            AmbiguousTypeMappingError: if a step has more than one match.
        """
        ep = self._endpoint_mappings(info.path, info.method)

        parameter = self._get_type_mapping(self._filter_mappings(ParameterTypeMatcher(info), ep))
        if parameter is not None:
            logger.debug("%s %s: parameter mapping '%s'", info.path, _method(info.method), parameter)
            return parameter

        response = self._get_type_mapping(self._filter_mappings(ResponseTypeMatcher(info), ep))
        if response is not None:
            logger.debug("%s %s: response mapping '%s'", info.path, _method(info.method), response)
            return response

        return self._get_type_mapping(self._filter_mappings(TypeMatcher(info), ep))

    def find_io_type_mapping(self, info: SchemaInfo) -> TypeMapping | None:
        """Find a global parameter (by name) or response (by content type) mapping."""
        parameter = self._get_type_mapping(self._filter_mappings(ParameterTypeMatcher(info), self.type_mappings))
        if parameter is not None:
            return parameter

        return self._get_type_mapping(self._filter_mappings(ResponseTypeMatcher(info), self.type_mappings))

    def find_type_mapping(self, info: SchemaInfo) -> TypeMapping | None:
        """Find the global type mapping of the schema."""
        return self._get_type_mapping(self._filter_mappings(TypeMatcher(info), self.type_mappings))

    # -- endpoint additions ---------------------------------------------------

    def find_endpoint_add_parameter_type_mappings(
        self, path: str, method: HttpMethod | None = None
    ) -> list[AddParameterTypeMapping]:
        """All additional parameters of the endpoint, in declaration order."""
        ep = self._endpoint_mappings(path, method)
        return self._filter_mappings(AddParameterTypeMatcher(), ep)

    # -- wrapper mappings (first match) ---------------------------------------

    def find_endpoint_result_type_mapping(self, info: SchemaInfo) -> ResultTypeMapping | None:
        ep = self._endpoint_mappings(info.path, info.method)
        return _first(self._filter_mappings(ResultTypeMatcher(), ep))

    def find_result_type_mapping(self) -> ResultTypeMapping | None:
        return _first(self._filter_mappings(ResultTypeMatcher(), self.type_mappings))

    def find_endpoint_single_type_mapping(self, info: SchemaInfo) -> TypeMapping | None:
        ep = self._endpoint_mappings(info.path, info.method)
        return _first(self._filter_mappings(SingleTypeMatcher(), ep))

    def find_single_type_mapping(self) -> TypeMapping | None:
        return _first(self._filter_mappings(SingleTypeMatcher(), self.type_mappings))

    def find_endpoint_multi_type_mapping(self, info: SchemaInfo) -> TypeMapping | None:
        ep = self._endpoint_mappings(info.path, info.method)
        return _first(self._filter_mappings(MultiTypeMatcher(), ep))

    def find_multi_type_mapping(self) -> TypeMapping | None:
        return _first(self._filter_mappings(MultiTypeMatcher(), self.type_mappings))

    def find_endpoint_null_type_mapping(self, info: SchemaInfo) -> NullTypeMapping | None:
        ep = self._endpoint_mappings(info.path, info.method)
        return _first(self._filter_mappings(NullTypeMatcher(), ep))

    def find_null_type_mapping(self) -> NullTypeMapping | None:
        return _first(self._filter_mappings(NullTypeMatcher(), self.type_mappings))

    def find_result_style(self) -> ResultStyle | None:
        """Value of the (global) result style option, if set."""
        match = _first(self._filter_mappings(ResultStyleMatcher(), self.type_mappings))
        return match.value if match is not None else None

    # -- annotations ----------------------------------------------------------

    def find_type_annotations(self, type_name: str, allow_object: bool = False) -> list[AnnotationTypeMapping]:
        """Global annotation mappings of ``type`` or ``type:format``.

        ``allow_object`` is set for model data types, it includes the
        annotation mappings of ``object``.
        """
        return self._filter_mappings(AnnotationTypeMatcher(type_name, allow_object), self.type_mappings)

    def find_parameter_annotations(
        self, path: str, method: HttpMethod | None, type_name: str
    ) -> list[AnnotationTypeMapping]:
        """Global and endpoint annotation mappings of a parameter type."""
        matcher = AnnotationTypeMatcher(type_name)
        ep = self._endpoint_mappings(path, method)
        return self._filter_mappings(matcher, self.type_mappings) + self._filter_mappings(matcher, ep)

    def find_parameter_name_annotations(
        self, path: str, method: HttpMethod | None, parameter_name: str
    ) -> list[AnnotationNameMapping]:
        """Global and endpoint annotation mappings of a parameter name."""
        matcher = AnnotationNameMatcher(parameter_name)
        ep = self._endpoint_mappings(path, method)
        return self._filter_mappings(matcher, self.type_mappings) + self._filter_mappings(matcher, ep)

    def find_extension_annotations(self, extension: str, value: str) -> list[AnnotationNameMapping]:
        """Annotation mappings of an extension value, e.g. ``x-foo: bar``."""
        ext = self._filter_mappings(ExtensionMatcher(extension), self.type_mappings)
        return self._filter_mappings(AnnotationNameMatcher(value), ext)

    # -- exclusion ------------------------------------------------------------

    def is_excluded_endpoint(self, path: str, method: HttpMethod | None = None) -> bool:
        """Check if the endpoint should be excluded.

        Endpoint rules match by path only, the method does not take part.
        The endpoint is excluded if any matching rule excludes it.

        Raises:
            AmbiguousTypeMappingError: if the same path/method is declared
                more than once.
        """
        matches = self._select_mappings(EndpointPathMatcher(path), self.type_mappings)
        if not matches:
            return False

        declared: dict[HttpMethod | None, list[EndpointTypeMapping]] = {}
        for match in matches:
            declared.setdefault(match.method, []).append(match)

        for duplicates in declared.values():
            if len(duplicates) > 1:
                raise AmbiguousTypeMappingError(duplicates)

        excluded = any(m.exclude for m in matches)
        if excluded:
            logger.debug("%s %s: excluded", path, _method(method))
        return excluded

    # -- deprecated -----------------------------------------------------------

    def find_endpoint_multi_mapping(self, info: SchemaInfo) -> list[TypeMapping]:
        """Deprecated, use find_endpoint_multi_type_mapping().

        Matches endpoint rules by path only.
        """
        warnings.warn(
            "find_endpoint_multi_mapping() is deprecated, use find_endpoint_multi_type_mapping()",
            DeprecationWarning,
            stacklevel=2,
        )
        ep = self._filter_mappings(EndpointPathMatcher(info.path), self.type_mappings)
        return self._select_mappings(MultiTypeMatcher(), ep)

    def find_multi_mapping(self, info: SchemaInfo) -> list[TypeMapping]:
        """Deprecated, use find_multi_type_mapping()."""
        warnings.warn(
            "find_multi_mapping() is deprecated, use find_multi_type_mapping()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._filter_mappings(MultiTypeMatcher(), self.type_mappings)

    # -- helpers --------------------------------------------------------------

    def _endpoint_mappings(self, path: str, method: HttpMethod | None) -> list:
        return self._filter_mappings(EndpointTypeMatcher(path, method), self.type_mappings)

    @staticmethod
    def _select_mappings(matcher, mappings: Iterable) -> list:
        return [m for m in mappings if isinstance(m, matcher.kind) and matcher(m)]

    @classmethod
    def _filter_mappings(cls, matcher, mappings: Iterable) -> list:
        return [child for m in cls._select_mappings(matcher, mappings) for child in m.child_mappings()]

    @staticmethod
    def _get_type_mapping(mappings: list) -> TypeMapping | None:
        if not mappings:
            return None

        if len(mappings) > 1:
            raise AmbiguousTypeMappingError(mappings)

        return mappings[0]


def _first(mappings: list):
    return mappings[0] if mappings else None


def _method(method: HttpMethod | None) -> str:
    return method.value if method is not None else "*"
