"""
Crowdin Sync Client - Managers Package

Contains manager classes for configuration and Git branch lookup.

Author: Crowdin Sync Project
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG, KEYRING_SERVICE, API_KEY_ENV_VAR
from .git_branch_resolver import GitBranchResolver

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'KEYRING_SERVICE',
    'API_KEY_ENV_VAR',
    'GitBranchResolver'
]
