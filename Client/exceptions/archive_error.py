"""
Crowdin Sync Client - Archive Error Exception

Exception raised when the downloaded translations archive cannot be
extracted (truncated, corrupt, or not a ZIP file at all).

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError


class ArchiveError(CrowdinError):
    """Exception for unusable translation archives."""
    pass
