"""
Crowdin Sync Client - Branch Resolution Error Exception

Exception raised when the current Git branch name cannot be determined.

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError


class BranchResolutionError(CrowdinError):
    """Exception raised when the Git branch lookup fails."""
    pass
