"""
Crowdin Sync Client - Request Error Exception

Base exception class for all errors raised while talking to the Crowdin API.

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError


class CrowdinAPIError(CrowdinError):
    """Base exception for API request errors."""
    pass
