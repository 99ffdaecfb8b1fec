"""
Crowdin Sync Client - Translation Operations Module

Implements the Upload and Download jobs.

Upload:   resolve filename -> fetch status -> choose method -> upload
Download: export -> download archive -> extract

Each step depends on the previous one, nothing is retried and the first
failure aborts the job.

Author: Crowdin Sync Project
"""

import logging
import tempfile
import zipfile
from pathlib import Path
from typing import Optional, Callable, List, Dict, Any

from exceptions import (
    ArchiveError,
    BranchResolutionError,
    CrowdinError,
    DuplicateRemoteFileError
)
from models import (
    DownloadJob,
    GIT_BRANCH_PLACEHOLDER,
    ProjectStatus,
    UploadJob,
    UploadMethod
)

# Configure logging
logger = logging.getLogger(__name__)


class TranslationOperations:
    """
    Runs upload and download jobs against one Crowdin project.

    Responsibilities:
    - Expand the branch placeholder in remote filenames
    - Decide between adding and updating a remote file
    - Trigger exports and unpack the downloaded archive
    - Report progress via callbacks
    """

    def __init__(self, api_client):
        """
        Initialize operations handler.

        Args:
            api_client: CrowdinAPI instance for server communication
        """
        self.api = api_client

    @staticmethod
    def resolve_upload_filename(template: str, branch_resolver: Optional[Callable[[], str]] = None) -> str:
        """
        Expand the #GIT_BRANCH# placeholder of a remote filename.

        The resolver is only called when the placeholder is present.

        Args:
            template: Remote filename, possibly holding the placeholder
            branch_resolver: Callable returning the current branch name

        Returns:
            Filename with the placeholder replaced by the branch name

        Raises:
            BranchResolutionError: If the branch name cannot be determined
        """
        if GIT_BRANCH_PLACEHOLDER not in template:
            return template

        if branch_resolver is None:
            raise BranchResolutionError(
                f"Filename '{template}' needs a branch name but no branch resolver was given")

        try:
            branch_name = branch_resolver()
        except BranchResolutionError:
            raise
        except Exception as e:
            raise BranchResolutionError(f"Branch lookup failed: {e}") from e

        if not branch_name:
            raise BranchResolutionError("Branch lookup returned an empty name")

        logger.debug(f"Detected git branch: {branch_name}")
        return template.replace(GIT_BRANCH_PLACEHOLDER, branch_name)

    @staticmethod
    def choose_upload_method(remote_filename: str, status: ProjectStatus) -> UploadMethod:
        """
        Decide whether the file must be added or updated.

        Args:
            remote_filename: Resolved remote filename
            status: Current project file listing

        Returns:
            UploadMethod.UPDATE if the listing holds exactly this name,
            UploadMethod.ADD otherwise

        Raises:
            DuplicateRemoteFileError: If the name is listed more than once
        """
        matches = status.names().count(remote_filename)

        if matches > 1:
            raise DuplicateRemoteFileError(remote_filename, matches)
        if matches == 1:
            return UploadMethod.UPDATE
        return UploadMethod.ADD

    def upload(self, job: UploadJob, branch_resolver: Optional[Callable[[], str]] = None,
               progress_callback: Optional[Callable] = None) -> Dict[str, Any]:
        """
        Upload a translation template to the project.

        Args:
            job: Source file and remote filename template
            branch_resolver: Callable returning the current branch name
            progress_callback: Optional callback for progress updates
                             Called with (message: str, current: int, total: int)

        Returns:
            Decoded JSON body of the upload response
        """
        logger.info(f"Starting Upload of {job.src_file}")

        if progress_callback:
            progress_callback("Resolving remote filename...", 0, 4)
        remote_filename = self.resolve_upload_filename(job.filename, branch_resolver)
        logger.info(f"Remote filename: {remote_filename}")

        if progress_callback:
            progress_callback("Fetching project status...", 1, 4)
        status = self.api.get_status()
        logger.debug(f"Project lists {len(status.files)} top-level entries")

        if progress_callback:
            progress_callback("Choosing upload method...", 2, 4)
        method = self.choose_upload_method(remote_filename, status)
        logger.info(f"Upload method: {method.value}")

        if progress_callback:
            progress_callback(f"Uploading {remote_filename}...", 3, 4)
        result = self.api.upload_file(method, remote_filename, job.src_file)

        if progress_callback:
            progress_callback("Upload complete", 4, 4)
        logger.info(f"Uploaded {job.src_file} to {remote_filename}")
        return result

    def download(self, job: DownloadJob, progress_callback: Optional[Callable] = None) -> List[str]:
        """
        Export the project translations and unpack them locally.

        Args:
            job: Target directory
            progress_callback: Optional callback for progress updates

        Returns:
            Names of the extracted archive members
        """
        logger.info(f"Starting Download into {job.output_dir}")

        if progress_callback:
            progress_callback("Exporting translations...", 0, 3)
        export_result = self.api.export()
        logger.debug(f"Crowdin export result: {export_result.get('success')}")

        if progress_callback:
            progress_callback("Downloading archive...", 1, 3)

        with tempfile.TemporaryFile(suffix=".zip") as archive_file:
            self.api.download_to_stream(archive_file)

            if progress_callback:
                progress_callback("Extracting archive...", 2, 3)
            archive_file.seek(0)
            extracted = self.extract_archive(archive_file, job.output_dir)

        if progress_callback:
            progress_callback("Download complete", 3, 3)
        logger.info(f"Extracted {len(extracted)} entries into {job.output_dir}")
        return extracted

    @staticmethod
    def extract_archive(archive_file, output_dir: str) -> List[str]:
        """
        Extract a ZIP archive into a directory.

        Args:
            archive_file: Seekable binary file object holding the archive
            output_dir: Target directory, created when missing

        Returns:
            Names of the extracted members

        Raises:
            ArchiveError: If the archive is corrupt or cannot be written out
        """
        target = Path(output_dir)

        try:
            target.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(archive_file) as archive:
                names = archive.namelist()
                # extractall() strips absolute paths and '..' components
                archive.extractall(target)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as e:
            raise ArchiveError(f"Cannot extract translations archive: {e}") from e
        except OSError as e:
            raise ArchiveError(f"Cannot write translations to {target}: {e}") from e

        return names

    def run(self, job, branch_resolver: Optional[Callable[[], str]] = None,
            progress_callback: Optional[Callable] = None):
        """
        Dispatch a job to the matching operation.

        Raises:
            CrowdinError: If the job type is unknown
        """
        if isinstance(job, UploadJob):
            return self.upload(job, branch_resolver, progress_callback)
        if isinstance(job, DownloadJob):
            return self.download(job, progress_callback)
        raise CrowdinError(f"Unknown job: {job!r}")
