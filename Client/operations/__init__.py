"""
Crowdin Sync Client - Operations Package

This package contains the upload and download operations.
"""

from .translation_operations import TranslationOperations

__all__ = ['TranslationOperations']
