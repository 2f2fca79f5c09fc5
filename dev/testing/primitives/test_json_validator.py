"""
Tests for JSONValidator Primitive

Generic schema validation and the predefined settings schema.
"""

from utctime.primitives.json_validator import JSONValidator


class TestJSONValidatorBasic:
    """Basic validation tests"""

    def test_validate_returns_true_for_valid_data(self):
        """Valid data against schema returns (True, [])"""
        validator = JSONValidator()
        schema = {
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        }

        is_valid, errors = validator.validate({"name": "utc"}, schema)

        assert is_valid is True
        assert errors == []

    def test_error_messages_carry_path(self):
        validator = JSONValidator()
        schema = {"type": "object", "properties": {"age": {"type": "integer"}}}

        is_valid, errors = validator.validate({"age": "old"}, schema)

        assert is_valid is False
        assert errors[0].startswith("age: ")

    def test_root_errors_are_labelled_root(self):
        validator = JSONValidator()

        is_valid, errors = validator.validate({}, {"type": "object", "required": ["name"]})

        assert is_valid is False
        assert errors[0].startswith("root: ")


class TestSettingsSchema:
    """SETTINGS_SCHEMA acceptance"""

    def test_empty_settings_are_valid(self):
        assert JSONValidator().validate_settings({}) == (True, [])

    def test_full_settings_are_valid(self):
        settings = {
            "debug": False,
            "log_file": "/var/log/utctime.log",
            "zones": {
                "pacific": "America/Los_Angeles",
                "eastern": "America/New_York",
                "central": "America/Chicago",
                "mountain": "America/Phoenix",
            },
        }

        assert JSONValidator().validate_settings(settings) == (True, [])

    def test_unknown_region_is_rejected(self):
        is_valid, errors = JSONValidator().validate_settings({"zones": {"alaska": "America/Anchorage"}})

        assert is_valid is False
        assert "zones" in errors[0]

    def test_empty_zone_name_is_rejected(self):
        is_valid, errors = JSONValidator().validate_settings({"zones": {"central": ""}})

        assert is_valid is False
        assert errors[0].startswith("zones.central: ")
