"""
Crowdin Sync Client - API Error Exception

Exception raised when a successful HTTP response carries an `error`
object in its JSON payload.

Author: Crowdin Sync Project
"""

from typing import Optional

from .request_error import CrowdinAPIError


class ApiError(CrowdinAPIError):
    """Exception for errors reported inside the JSON payload."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
