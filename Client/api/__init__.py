"""
Crowdin Sync Client - API Package

This package contains the Crowdin API communication class.
"""

from .crowdin_api import CrowdinAPI

__all__ = ['CrowdinAPI']
