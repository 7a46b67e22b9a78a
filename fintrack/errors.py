# -*- coding: utf-8 -*-
"""
Domain errors raised by the service layer.

Routes never build error payloads for these by hand: the handlers registered
in main.py turn each one into `{"data": null, "error": "<message>"}` with the
matching status code.
"""
from fastapi import status


class FinanceTrackerError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(FinanceTrackerError):
    # Same message for unknown email and wrong password
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid email or password"


class DuplicateAccount(FinanceTrackerError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already exists"


class NotFound(FinanceTrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ValidationFailure(FinanceTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid data"


class ConfigurationError(RuntimeError):
    """Deployment is misconfigured (e.g. no signing secret). Fatal at startup."""
