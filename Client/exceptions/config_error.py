"""
Crowdin Sync Client - Configuration Error Exception

Exception raised when required configuration is missing or invalid.

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError


class ConfigError(CrowdinError):
    """Exception for missing or invalid configuration."""
    pass
