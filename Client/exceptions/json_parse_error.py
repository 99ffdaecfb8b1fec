"""
Crowdin Sync Client - JSON Parse Error Exception

Exception raised when a response body is present but is not valid JSON.

Author: Crowdin Sync Project
"""

from .request_error import CrowdinAPIError


class JsonParseError(CrowdinAPIError):
    """Exception for response bodies that cannot be parsed."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
