# -*- coding: utf-8 -*-
"""
Tests for user-facing error messages.
"""

from services.error_mapper import extract_validation_details, map_exception
from services.exceptions import (
    ApiException, AuthenticationException, NetworkException, ValidationException
)


class TestErrorMapper:
    """Test user-facing error messages."""

    def test_unauthorized(self):
        assert map_exception(AuthenticationException()) == (
            "Your session has expired. Please log in again."
        )

    def test_timeout(self):
        error = NetworkException("timeout", original_error=TimeoutError("Read timed out"))
        assert map_exception(error) == "The server took too long to respond. Please try again."

    def test_server_error(self):
        error = ApiException("boom", status_code=500)
        assert map_exception(error) == (
            "Could not connect to the server. Please check your connection."
        )

    def test_unexpected(self):
        assert map_exception(RuntimeError("x")) == "An unexpected error occurred."

    def test_validation_details(self):
        details = extract_validation_details({"errors": {"Location": ["Required"]}})
        assert details == "• Location: Required"

    def test_backend_validation_message(self):
        error = ValidationException("Location is required", errors=["location"])
        assert map_exception(error) == "Location is required"

    def test_context_is_attached(self):
        error = ApiException("boom", status_code=502)
        map_exception(error, context="submit_report")
        assert error.context == "submit_report"
