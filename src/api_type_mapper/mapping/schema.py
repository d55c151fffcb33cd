"""Request descriptor passed to the mapping finder.

A SchemaInfo describes the schema location being resolved: the endpoint
(path + optional http method) and, depending on the query, the parameter
name, content type and OpenAPI type/format of the schema.
"""

from enum import Enum

from pydantic import BaseModel


class HttpMethod(str, Enum):
    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


class SchemaInfo(BaseModel):
    """What is being asked about. Immutable."""

    model_config = {"frozen": True}

    path: str
    method: HttpMethod | None = None  # None: endpoint level, any method
    name: str = ""  # parameter / property / schema name
    content_type: str = ""
    type: str = ""  # OpenAPI type, e.g. string / integer / object
    format: str | None = None
    primitive: bool = False
    array: bool = False

    @classmethod
    def endpoint(cls, path: str, method: HttpMethod | None = None) -> "SchemaInfo":
        """Descriptor that only carries the endpoint identity."""
        return cls(path=path, method=method)
