"""
Crowdin Sync Client - Remote Error Exception

Exception raised for HTTP responses with status 400 or above.
The message is the raw response body.

Author: Crowdin Sync Project
"""

from typing import Optional

from .request_error import CrowdinAPIError


class RemoteError(CrowdinAPIError):
    """Exception for HTTP error responses."""

    def __init__(self, body: str, status_code: Optional[int] = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code
