"""
Crowdin Sync Client - Exceptions Package

Contains all exception classes for the Crowdin sync client.

Author: Crowdin Sync Project
"""

from .crowdin_error import CrowdinError
from .config_error import ConfigError
from .branch_resolution_error import BranchResolutionError
from .duplicate_remote_file_error import DuplicateRemoteFileError
from .upload_source_error import UploadSourceError
from .archive_error import ArchiveError
from .request_error import CrowdinAPIError
from .empty_response_error import EmptyResponseError
from .remote_error import RemoteError
from .api_error import ApiError
from .json_parse_error import JsonParseError

__all__ = [
    'CrowdinError',
    'ConfigError',
    'BranchResolutionError',
    'DuplicateRemoteFileError',
    'UploadSourceError',
    'ArchiveError',
    'CrowdinAPIError',
    'EmptyResponseError',
    'RemoteError',
    'ApiError',
    'JsonParseError'
]
