"""
Crowdin Sync Client - Empty Response Error Exception

Exception raised when no HTTP response was obtained at all.

Author: Crowdin Sync Project
"""

from .request_error import CrowdinAPIError


class EmptyResponseError(CrowdinAPIError):
    """Exception for requests that produced no response."""
    pass
