"""
Crowdin Sync Client - Job Models

Contains the per-invocation upload and download job descriptions.

Author: Crowdin Sync Project
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from exceptions import ConfigError


# Placeholder replaced by the current Git branch name in remote filenames
GIT_BRANCH_PLACEHOLDER = "#GIT_BRANCH#"


@dataclass(frozen=True)
class UploadJob:
    """
    A translation template upload.

    Attributes:
        src_file: Local path of the file to upload
        filename: Remote filename template, may contain GIT_BRANCH_PLACEHOLDER
    """
    src_file: str
    filename: str

    @property
    def uses_branch_placeholder(self) -> bool:
        return GIT_BRANCH_PLACEHOLDER in self.filename

    @classmethod
    def from_options(cls, options: Dict[str, Any],
                     src_file: Optional[str] = None,
                     filename: Optional[str] = None) -> "UploadJob":
        """
        Build an upload job from the config "upload" section.

        Explicit arguments take priority over the section values.

        Raises:
            ConfigError: If the source file or remote filename is missing
        """
        src_file = src_file or options.get("src_file")
        filename = filename or options.get("filename")
        if not src_file:
            raise ConfigError("Upload job requires a source file (src_file)")
        if not filename:
            raise ConfigError("Upload job requires a remote filename (filename)")
        return cls(src_file=src_file, filename=filename)


@dataclass(frozen=True)
class DownloadJob:
    """
    A translations download.

    Attributes:
        output_dir: Directory the exported archive is extracted into
    """
    output_dir: str

    @classmethod
    def from_options(cls, options: Dict[str, Any],
                     output_dir: Optional[str] = None) -> "DownloadJob":
        """
        Build a download job from the config "download" section.

        Raises:
            ConfigError: If the output directory is missing
        """
        output_dir = output_dir or options.get("output_dir")
        if not output_dir:
            raise ConfigError("Download job requires an output directory (output_dir)")
        return cls(output_dir=output_dir)
