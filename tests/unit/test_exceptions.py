"""Unit tests for custom exception hierarchy"""
import logging
from datetime import datetime

from eunoia.exceptions import (
    EunoiaError,
    ValidationError,
    AchievementNotFoundError,
    ConfigurationError,
)


class TestEunoiaError:
    """Test base exception class"""

    def test_basic_exception(self):
        """Test basic exception creation"""
        error = EunoiaError("Test error")
        assert error.message == "Test error"
        assert error.user_message == "An error occurred. Please try again."
        assert error.request_id is not None
        assert isinstance(error.timestamp, datetime)

    def test_exception_with_context(self):
        """Test exception with full context"""
        error = EunoiaError(
            message="Evaluation failed",
            user_id="42",
            operation="evaluate_achievements",
            context={"entry_count": 12},
            user_message="Could not load your badges"
        )
        assert error.user_id == "42"
        assert error.operation == "evaluate_achievements"
        assert error.context["entry_count"] == 12
        assert error.user_message == "Could not load your badges"

    def test_exception_with_cause(self):
        """Test exception wrapping another exception"""
        original_error = ValueError("Invalid value")
        error = EunoiaError(message="Validation failed", cause=original_error)
        assert error.cause == original_error

    def test_to_dict(self):
        """Test exception serialization"""
        error = EunoiaError(message="Test error", user_id="42")
        error_dict = error.to_dict()
        assert error_dict["error"] == "EunoiaError"
        assert error_dict["message"] == "Test error"
        assert error_dict["user_message"] == "An error occurred. Please try again."
        assert "request_id" in error_dict
        assert "timestamp" in error_dict

    def test_logs_on_creation(self, caplog):
        """Test errors are logged when created"""
        with caplog.at_level(logging.ERROR, logger="eunoia.exceptions"):
            EunoiaError("Something broke", operation="test_op")

        assert "EunoiaError: Something broke" in caplog.text
        assert caplog.records[-1].operation == "test_op"


class TestValidationError:
    """Test validation error"""

    def test_validation_error(self):
        """Test validation error with field"""
        error = ValidationError(
            message="Unknown timezone 'Nowhere'",
            field="timezone",
            value="Nowhere"
        )
        assert error.field == "timezone"
        assert error.value == "Nowhere"
        assert "Invalid timezone" in error.user_message
        assert isinstance(error, EunoiaError)


class TestAchievementNotFoundError:
    """Test registry lookup error"""

    def test_not_found(self):
        """Test default message names the id"""
        error = AchievementNotFoundError("speed_reader")
        assert error.achievement_id == "speed_reader"
        assert "speed_reader" in error.message
        assert error.context == {"achievement_id": "speed_reader"}


class TestConfigurationError:
    """Test configuration error"""

    def test_configuration_error(self):
        """Test config key is recorded"""
        error = ConfigurationError("Bad value", config_key="ENTRY_TIMEZONE")
        assert error.config_key == "ENTRY_TIMEZONE"
        assert "not properly configured" in error.user_message
