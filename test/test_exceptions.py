"""
Tests for custom exception classes

Tests exception initialization, messages, status codes, and details.
"""

from fastapi import status

from sparse_fields.exceptions import ConfigurationError, FieldSelectionError, InvalidGroupError


class TestFieldSelectionError:
    """Test base FieldSelectionError class"""

    def test_default(self):
        """Test FieldSelectionError with default values"""
        exc = FieldSelectionError("Test error")
        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}

    def test_with_custom_status(self):
        """Test FieldSelectionError with custom status code"""
        exc = FieldSelectionError("Test error", status_code=status.HTTP_400_BAD_REQUEST)
        assert exc.status_code == status.HTTP_400_BAD_REQUEST

    def test_with_details(self):
        """Test FieldSelectionError with details"""
        exc = FieldSelectionError("Test error", details={"key": "value"})
        assert exc.details["key"] == "value"


class TestConfigurationErrors:
    """Test construction-time exceptions"""

    def test_configuration_error(self):
        """Test ConfigurationError"""
        exc = ConfigurationError("availableFields must be provided and non-empty")
        assert isinstance(exc, FieldSelectionError)
        assert str(exc) == "availableFields must be provided and non-empty"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_invalid_group_error(self):
        """Test InvalidGroupError message and details"""
        exc = InvalidGroupError("contact", ["email", "fax"])
        assert str(exc) == "Group contact contains invalid fields: email, fax"
        assert exc.details == {"group": "contact", "fields": ["email", "fax"]}
