"""Converts the raw processor options into ApiOptions.

Reads the ``options:`` section of the mapping document. The ``map:``
section (the type mappings) is converted by the mapping reader.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from api_type_mapper.options import ApiOptions, InvalidOptionError

logger = logging.getLogger(__name__)

# mapping yaml key => ApiOptions field
OPTION_FIELDS = {
    "package-name": "package_name",
    "model-name-suffix": "model_name_suffix",
    "model-type": "model_type",
    "enum-type": "enum_type",
    "javadoc": "javadoc",
    "format-code": "format_code",
    "generated-date": "generated_date",
    "one-of-interface": "one_of_interface",
}

COMPATIBILITY_FIELDS = {
    "bean-validation-valid-on-reactive": "bean_validation_valid_on_reactive",
    "identifier-word-break-from-digit-to-letter": "identifier_word_break_from_digit_to_letter",
}

BEAN_VALIDATION_FORMATS = ("javax", "jakarta")

# ApiOptions field => option key reported in errors
_OPTION_KEYS = {
    "target_dir": "targetDir",
    **{field: key for key, field in OPTION_FIELDS.items()},
    **{field: key for key, field in COMPATIBILITY_FIELDS.items()},
}


class OptionsConverter:
    """Builds ApiOptions from the processor options map.

    With ``check_obsolete`` the deprecated top level options (packageName,
    beanValidation, typeMappings) are accepted too.
    """

    def __init__(self, check_obsolete: bool = False):
        self.check_obsolete = check_obsolete

    def convert_options(self, options: dict) -> ApiOptions:
        values: dict = {}

        if "targetDir" in options:
            values["target_dir"] = options["targetDir"]

        if self.check_obsolete:
            self._read_obsolete(options, values)

        mapping = options.get("mapping")
        if mapping is not None:
            self._read_mapping(mapping, values)

        try:
            return ApiOptions(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "options"
            raise InvalidOptionError(_OPTION_KEYS.get(field, field), error["msg"]) from e

    def _read_obsolete(self, options: dict, values: dict) -> None:
        if "packageName" in options:
            logger.warning("'packageName' option is deprecated, use 'options.package-name' of the mapping")
            values["package_name"] = options["packageName"]

        if "beanValidation" in options:
            logger.warning("'beanValidation' option is deprecated, use 'options.bean-validation' of the mapping")
            values.update(_bean_validation(options["beanValidation"]))

        if "typeMappings" in options:
            logger.warning("'typeMappings' option is deprecated, use 'mapping'")
            self._read_mapping(options["typeMappings"], values)

    def _read_mapping(self, mapping: str, values: dict) -> None:
        try:
            doc = yaml.safe_load(_mapping_text(mapping))
        except yaml.YAMLError as e:
            raise InvalidOptionError("mapping", str(e)) from e

        if doc is None:
            return

        if not isinstance(doc, dict):
            raise InvalidOptionError("mapping", "expected a yaml mapping document")

        options = doc.get("options") or {}
        if not isinstance(options, dict):
            raise InvalidOptionError("options", "expected a yaml mapping")

        for key, value in options.items():
            if key in OPTION_FIELDS:
                values[OPTION_FIELDS[key]] = value
            elif key == "bean-validation":
                values.update(_bean_validation(value))
            elif key == "compatibility":
                self._read_compatibility(value, values)
            else:
                logger.debug("ignoring unknown option '%s'", key)

    def _read_compatibility(self, compatibility: dict, values: dict) -> None:
        if compatibility is None:
            return
        if not isinstance(compatibility, dict):
            raise InvalidOptionError("compatibility", "expected a yaml mapping")

        for key, value in compatibility.items():
            if key in COMPATIBILITY_FIELDS:
                values[COMPATIBILITY_FIELDS[key]] = value
            else:
                logger.debug("ignoring unknown compatibility option '%s'", key)


def _bean_validation(value) -> dict:
    """bean-validation accepts false, true (javax), javax or jakarta."""
    if value is False or value == "false":
        return {"bean_validation": False, "bean_validation_format": None}
    if value is True or value == "true":
        return {"bean_validation": True, "bean_validation_format": "javax"}
    if value in BEAN_VALIDATION_FORMATS:
        return {"bean_validation": True, "bean_validation_format": value}
    raise InvalidOptionError("bean-validation", f"unknown value '{value}'")


def _mapping_text(mapping: str) -> str:
    """The mapping option is either the yaml itself or a path to a yaml file."""
    if "\n" not in mapping and mapping.endswith((".yaml", ".yml")):
        path = Path(mapping)
        if path.is_file():
            return path.read_text(encoding="utf-8")
    return mapping
