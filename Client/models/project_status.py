"""
Crowdin Sync Client - Project Status Model

Contains the parsed result of the project "info" call.

Author: Crowdin Sync Project
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from exceptions import JsonParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteFile:
    """A single entry of the project file listing."""
    name: str
    node_type: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class ProjectStatus:
    """
    Read-only view of a project's file listing.

    Only the top-level entries are kept, in the order the API returned them.
    """
    files: Tuple[RemoteFile, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "ProjectStatus":
        """
        Parse the JSON body of an "info" response.

        Args:
            data: Decoded response body

        Returns:
            ProjectStatus with one RemoteFile per listed entry

        Raises:
            JsonParseError: If the file listing is not an array
        """
        entries = data.get("files")
        if entries is None:
            logger.warning("Project info response has no file listing")
            entries = []
        elif not isinstance(entries, list):
            raise JsonParseError(
                f"Project info file listing is not a list: {entries!r}", body=str(entries))

        files = []
        for entry in entries:
            if not isinstance(entry, dict):
                logger.debug(f"Skipping malformed file entry: {entry!r}")
                continue
            files.append(RemoteFile(
                name=entry.get("name", ""),
                node_type=entry.get("node_type"),
                raw=entry
            ))

        return cls(files=tuple(files), raw=data)

    def names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.files)
