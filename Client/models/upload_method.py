"""
Crowdin Sync Client - Upload Method Model

Author: Crowdin Sync Project
"""

from enum import Enum


class UploadMethod(Enum):
    """
    Remote action used to upload a file.

    The value is the API action name:
    - ADD: File does not exist in the project yet
    - UPDATE: File already exists and is replaced
    """
    ADD = "add-file"
    UPDATE = "update-file"
