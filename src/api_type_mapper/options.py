"""Processor options."""

from pydantic import BaseModel

from api_type_mapper.mapping.base import Mapping, ResultStyle
from api_type_mapper.mapping.finder import MappingFinder

DEFAULT_PACKAGE_NAME = "io.openapiprocessor.generated"


class InvalidOptionError(Exception):
    """A required option is missing or an option value is not valid."""

    def __init__(self, option: str, reason: str = "missing"):
        self.option = option
        super().__init__(f"invalid option '{option}': {reason}")


class ApiOptions(BaseModel):
    """Options of the code generator.

    ``type_mappings`` is the flat list of type mapping rules. Global rules
    override the mapping of a schema everywhere, endpoint rules override
    parameter/response mappings of a single endpoint (or endpoint method) or
    add additional parameters to it.
    """

    model_config = {"protected_namespaces": ()}

    target_dir: str | None = None  # parent of the package_name folder tree
    package_name: str = DEFAULT_PACKAGE_NAME
    bean_validation: bool = False
    bean_validation_format: str | None = None  # javax or jakarta
    javadoc: bool = False
    model_type: str = "default"  # default or record
    enum_type: str = "default"  # default, string or supplier
    model_name_suffix: str = ""
    one_of_interface: bool = False
    format_code: bool = False
    generated_date: bool = True
    type_mappings: list[Mapping] = []

    # compatibility
    bean_validation_valid_on_reactive: bool = True
    identifier_word_break_from_digit_to_letter: bool = True

    def validate_options(self) -> None:
        """Check that the target dir is set."""
        if self.target_dir is None:
            raise InvalidOptionError("targetDir")

    @property
    def result_style(self) -> ResultStyle:
        """Global result style option, SUCCESS if not set."""
        return MappingFinder(self.type_mappings).find_result_style() or ResultStyle.SUCCESS
