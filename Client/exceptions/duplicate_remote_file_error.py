"""
Crowdin Sync Client - Duplicate Remote File Error Exception

Exception raised when the project listing holds the target filename more
than once, so add-vs-update cannot be decided.

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError


class DuplicateRemoteFileError(CrowdinError):
    """Exception for ambiguous remote file listings."""

    def __init__(self, filename: str, count: int):
        super().__init__(f"Remote project lists '{filename}' {count} times")
        self.filename = filename
        self.count = count
