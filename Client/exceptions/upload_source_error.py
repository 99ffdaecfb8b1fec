"""
Crowdin Sync Client - Upload Source Error Exception

Exception raised when the local file to upload cannot be read.

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError


class UploadSourceError(CrowdinError):
    """Exception for unreadable upload source files."""
    pass
