"""
JSONValidator Primitive

Validates JSON data against schemas using jsonschema library.
Provides the predefined schema for utctime settings files.
"""

from typing import Any

from jsonschema import Draft7Validator


class JSONValidator:
    """Validates JSON against schemas"""

    @staticmethod
    def _format_validation_error(error: Any) -> str:
        """
        Format a jsonschema validation error into a readable message

        Args:
            error: ValidationError from jsonschema

        Returns:
            str: Formatted error message with path and details
        """
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        return f"{path}: {error.message}"

    _ZONE_NAME = {"type": "string", "minLength": 1}

    SETTINGS_SCHEMA = {
        "type": "object",
        "properties": {
            "debug": {"type": "boolean"},
            "log_file": {"type": "string", "minLength": 1},
            "zones": {
                "type": "object",
                "properties": {
                    "pacific": _ZONE_NAME,
                    "eastern": _ZONE_NAME,
                    "central": _ZONE_NAME,
                    "mountain": _ZONE_NAME,
                },
                "additionalProperties": False,
            },
        },
        "additionalProperties": False,
    }

    def validate(self, data: Any, schema: dict) -> tuple[bool, list[str]]:
        """
        Validate JSON data against a schema

        Args:
            data: The JSON data to validate
            schema: The JSON schema to validate against

        Returns:
            tuple[bool, list[str]]: (is_valid, error_messages)
                - is_valid: True if valid, False otherwise
                - error_messages: List of specific error messages (empty if valid)
        """
        validator = Draft7Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])

        if not errors:
            return (True, [])

        return (False, [self._format_validation_error(error) for error in errors])

    def validate_settings(self, data: Any) -> tuple[bool, list[str]]:
        """Validate a settings document against SETTINGS_SCHEMA"""
        return self.validate(data, self.SETTINGS_SCHEMA)
