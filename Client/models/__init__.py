"""
Crowdin Sync Client - Models Package

Contains data models and enumerations used by the client.

Author: Crowdin Sync Project
"""

from .client_config import ClientConfig, DEFAULT_ENDPOINT_URL
from .jobs import UploadJob, DownloadJob, GIT_BRANCH_PLACEHOLDER
from .project_status import ProjectStatus, RemoteFile
from .upload_method import UploadMethod

__all__ = [
    'ClientConfig',
    'DEFAULT_ENDPOINT_URL',
    'UploadJob',
    'DownloadJob',
    'GIT_BRANCH_PLACEHOLDER',
    'ProjectStatus',
    'RemoteFile',
    'UploadMethod'
]
