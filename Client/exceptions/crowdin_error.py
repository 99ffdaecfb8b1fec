"""
Crowdin Sync Client - Base Error Exception

Base exception class for all client errors.

Author: Crowdin Sync Project
"""


class CrowdinError(Exception):
    """Base exception for Crowdin sync errors."""
    pass
