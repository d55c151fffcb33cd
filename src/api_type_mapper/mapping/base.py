"""Type mapping rule models.

The configuration loader converts a mapping document into a flat list of
these rules. Each rule is a frozen model tagged by its ``kind``; rules that
scope other rules (endpoint, extension) own a list of child rules.

``child_mappings()`` returns the rules a scope narrows to. Wrapper rules
(name, content type) return the type mapping they wrap, leaf rules return
themselves.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .schema import HttpMethod

SINGLE = "single"
MULTI = "multi"
NULL = "null"


class ResultStyle(str, Enum):
    """Which responses get the result wrapper: only success or all."""

    SUCCESS = "success"
    ALL = "all"


class Annotation(BaseModel):
    """An additional annotation: fully qualified type plus its parameters."""

    model_config = {"frozen": True}

    type: str
    parameters: dict[str, str] = {}


class TypeMapping(BaseModel):
    """Maps an OpenAPI type (or schema name) to a target type.

    Also carries the "single" and "multi" wrapper mappings, which are type
    mappings with a reserved source type name.
    """

    model_config = {"frozen": True}

    kind: Literal["type"] = "type"
    source_type_name: str | None = None
    source_type_format: str | None = None
    target_type_name: str
    generic_types: list[str] = []
    generic: bool = False  # target takes the source type as generic parameter

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        source = self.source_type_name or ""
        if self.source_type_format:
            source = f"{source}:{self.source_type_format}"
        return f"{source} => {self.target_type_name}"


class NameTypeMapping(BaseModel):
    """Type mapping of a single parameter (or property), selected by name."""

    model_config = {"frozen": True}

    kind: Literal["name"] = "name"
    parameter_name: str
    mapping: TypeMapping

    def child_mappings(self) -> list["Mapping"]:
        return [self.mapping]

    def __str__(self) -> str:
        return f"{self.parameter_name} => {self.mapping.target_type_name}"


class ContentTypeMapping(BaseModel):
    """Type mapping of a request body or response, selected by media type."""

    model_config = {"frozen": True}

    kind: Literal["content_type"] = "content_type"
    content_type: str
    mapping: TypeMapping

    def child_mappings(self) -> list["Mapping"]:
        return [self.mapping]

    def __str__(self) -> str:
        return f"{self.content_type} => {self.mapping.target_type_name}"


class AddParameterTypeMapping(BaseModel):
    """An additional endpoint parameter that is not part of the api."""

    model_config = {"frozen": True}

    kind: Literal["add_parameter"] = "add_parameter"
    parameter_name: str
    mapping: TypeMapping
    annotation: Annotation | None = None

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        return f"+{self.parameter_name} => {self.mapping.target_type_name}"


class ResultTypeMapping(BaseModel):
    """Wrapper type of the endpoint result."""

    model_config = {"frozen": True}

    kind: Literal["result"] = "result"
    target_type_name: str

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        return f"result => {self.target_type_name}"


class NullTypeMapping(BaseModel):
    """Wrapper type of nullable properties."""

    model_config = {"frozen": True}

    kind: Literal["null"] = "null"
    source_type_name: str = NULL
    target_type_name: str
    undefined: str | None = None  # initializer of an unset value

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        return f"{self.source_type_name} => {self.target_type_name}"


class AnnotationNameMapping(BaseModel):
    """Additional annotation of a parameter, selected by parameter name."""

    model_config = {"frozen": True}

    kind: Literal["annotation_name"] = "annotation_name"
    parameter_name: str
    annotation: Annotation

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        return f"{self.parameter_name} @ {self.annotation.type}"


class AnnotationTypeMapping(BaseModel):
    """Additional annotation of a type, selected by type name and format."""

    model_config = {"frozen": True}

    kind: Literal["annotation_type"] = "annotation_type"
    source_type_name: str
    source_type_format: str | None = None
    annotation: Annotation

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        source = self.source_type_name
        if self.source_type_format:
            source = f"{source}:{self.source_type_format}"
        return f"{source} @ {self.annotation.type}"


class ResultStyleOptionMapping(BaseModel):
    """Global result style option."""

    model_config = {"frozen": True}

    kind: Literal["result_style"] = "result_style"
    value: ResultStyle

    def child_mappings(self) -> list["Mapping"]:
        return [self]

    def __str__(self) -> str:
        return f"result-style => {self.value.value}"


class EndpointTypeMapping(BaseModel):
    """Mappings that only apply to one endpoint, or one endpoint method."""

    model_config = {"frozen": True}

    kind: Literal["endpoint"] = "endpoint"
    path: str
    method: HttpMethod | None = None  # None: all methods of the path
    type_mappings: list["Mapping"] = []
    exclude: bool = False

    def child_mappings(self) -> list["Mapping"]:
        return list(self.type_mappings)

    def __str__(self) -> str:
        method = self.method.value if self.method else "*"
        return f"{self.path} {method}"


class ExtensionMapping(BaseModel):
    """Mappings attached to an OpenAPI extension (``x-...``) key."""

    model_config = {"frozen": True}

    kind: Literal["extension"] = "extension"
    extension: str
    type_mappings: list["Mapping"] = []

    def child_mappings(self) -> list["Mapping"]:
        return list(self.type_mappings)

    def __str__(self) -> str:
        return self.extension


Mapping = Annotated[
    Union[
        TypeMapping,
        NameTypeMapping,
        ContentTypeMapping,
        AddParameterTypeMapping,
        ResultTypeMapping,
        NullTypeMapping,
        AnnotationNameMapping,
        AnnotationTypeMapping,
        ResultStyleOptionMapping,
        EndpointTypeMapping,
        ExtensionMapping,
    ],
    Field(discriminator="kind"),
]

EndpointTypeMapping.model_rebuild()
ExtensionMapping.model_rebuild()
