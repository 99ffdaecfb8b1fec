"""
Crowdin Sync Client - API Communication Module

Handles all communication with the Crowdin project API.
Builds project URLs, authenticates with the project API key and maps
HTTP and payload failures onto the client exception hierarchy.

Author: Crowdin Sync Project
"""

import json
import logging
import os
import requests
from typing import Optional, Dict, Any

from exceptions import (
    EmptyResponseError,
    RemoteError,
    ApiError,
    JsonParseError,
    UploadSourceError
)
from models import ClientConfig, ProjectStatus, UploadMethod
from version import VERSION

# Configure logging
logger = logging.getLogger(__name__)


DOWNLOAD_ALL_ACTION = "download/all.zip"
DOWNLOAD_CHUNK_SIZE = 8192


class CrowdinAPI:
    """
    API client for a single Crowdin project.

    Responsibilities:
    - Form project action URLs
    - Attach the API key to every request
    - Parse JSON responses and raise on HTTP or payload errors
    - Stream the translations archive
    """

    def __init__(self, config: ClientConfig, timeout: float = 30, download_timeout: float = 300):
        """
        Initialize API client.

        Args:
            config: Immutable connection settings
            timeout: Socket timeout in seconds for JSON requests
            download_timeout: Socket timeout in seconds for the archive download
        """
        self.config = config
        self.timeout = timeout
        self.download_timeout = download_timeout
        # Use session for connection pooling across the chained calls of one job
        self.session = requests.Session()
        self.session.headers["User-Agent"] = f"crowdin-sync/{VERSION}"
        logger.debug(f"Initialized API client for project {config.project_identifier} at {config.endpoint_url}")

    def close(self):
        """
        Close the session and release resources.

        Should be called when done using the API client.
        """
        if getattr(self, 'session', None):
            self.session.close()
            self.session = None
            logger.debug("API client session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def form_url(self, action: str) -> str:
        """
        Build the URL of a project action.

        Args:
            action: Action path (e.g., "info", "download/all.zip")

        Returns:
            "{endpoint}/project/{project}/{action}"
        """
        return f"{self.config.endpoint_url}/project/{self.config.project_identifier}/{action}"

    def _query_params(self) -> Dict[str, str]:
        return {
            "key": self.config.api_key,
            "json": "json"
        }

    def _parse_response(self, response: Optional[requests.Response]) -> Dict[str, Any]:
        """
        Turn a raw response into decoded JSON data.

        Args:
            response: Response object, or None if nothing came back

        Returns:
            Decoded JSON body ({} for an empty body)

        Raises:
            EmptyResponseError: If there is no response
            RemoteError: If the status code is 400 or above
            JsonParseError: If the body is not valid JSON
            ApiError: If the payload carries an `error` field
        """
        if response is None:
            raise EmptyResponseError("No response")

        body = response.text

        if response.status_code >= 400:
            logger.error(f"Request failed: {body}")
            raise RemoteError(body, status_code=response.status_code)

        if not body:
            return {}

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Response is not valid JSON: {e}")
            raise JsonParseError(f"Invalid JSON in response: {e}", body=body) from e

        if isinstance(data, dict) and "error" in data:
            error = data["error"]
            # Objects and arrays count as errors even when empty
            if isinstance(error, dict):
                raise ApiError(str(error.get("message") or "Unknown API error"), code=error.get("code"))
            if isinstance(error, list) or error:
                raise ApiError(str(error) if error else "Unknown API error")

        return data

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        """
        Send a request, translating transport failures into EmptyResponseError.
        """
        if "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout

        try:
            return self.session.request(method, url, **kwargs)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to {self.config.endpoint_url}: {e}")
            raise EmptyResponseError(f"No response: cannot connect to {self.config.endpoint_url}") from e
        except requests.exceptions.Timeout as e:
            logger.error("Request timed out")
            raise EmptyResponseError("No response: request timed out") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            raise EmptyResponseError(f"No response: {str(e)}") from e

    def get_request(self, action: str) -> Dict[str, Any]:
        """
        Make an authenticated GET request to a project action.

        Args:
            action: Action path (e.g., "info")

        Returns:
            Decoded JSON body
        """
        url = self.form_url(action)
        logger.debug(f"Making GET request to: {url}")
        response = self._send("GET", url, params=self._query_params())
        return self._parse_response(response)

    def post_request(self, action: str, files: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make an authenticated multipart POST request to a project action.

        Args:
            action: Action path (e.g., "add-file")
            files: Multipart file fields, passed through to requests

        Returns:
            Decoded JSON body
        """
        url = self.form_url(action)
        logger.debug(f"Making POST request to: {url}")
        response = self._send("POST", url, params=self._query_params(), files=files)
        return self._parse_response(response)

    # ==================== Project Endpoints ====================

    def get_status(self) -> ProjectStatus:
        """
        Fetch the project info, including its file listing.

        Returns:
            Parsed ProjectStatus

        Raises:
            CrowdinAPIError: On any request or payload failure
        """
        data = self.get_request("info")
        if not isinstance(data, dict):
            raise JsonParseError("Unexpected project info payload", body=str(data))
        return ProjectStatus.from_response(data)

    def upload_file(self, method: UploadMethod, remote_filename: str, local_file_path: str) -> Dict[str, Any]:
        """
        Upload a local file under the given remote name.

        The multipart form holds a single field, "files[<remote_filename>]".

        Args:
            method: ADD or UPDATE, selects the remote action
            remote_filename: Name of the file inside the project
            local_file_path: Path of the file to upload

        Returns:
            Decoded JSON body of the upload response

        Raises:
            UploadSourceError: If the local file cannot be opened
            CrowdinAPIError: On any request or payload failure
        """
        logger.info(f"Uploading {local_file_path} as {remote_filename} ({method.value})")

        try:
            source = open(local_file_path, 'rb')
        except OSError as e:
            raise UploadSourceError(f"Cannot read upload source {local_file_path}: {e}") from e

        with source:
            files = {
                f"files[{remote_filename}]": (os.path.basename(local_file_path), source)
            }
            return self.post_request(method.value, files)

    def export(self) -> Dict[str, Any]:
        """
        Ask the server to build a fresh translations package.

        Returns:
            Decoded JSON body (contains a `success` indicator)
        """
        return self.get_request("export")

    def download_archive(self) -> requests.Response:
        """
        Open a streaming download of the full translations archive.

        The caller owns the returned response and must close it
        (it is usable as a context manager).

        Returns:
            Streaming response of "download/all.zip"

        Raises:
            EmptyResponseError: If no response is received
            RemoteError: If the status code is 400 or above
        """
        url = self.form_url(DOWNLOAD_ALL_ACTION)
        logger.debug(f"Downloading translations from: {url}")

        response = self._send(
            "GET",
            url,
            params={"key": self.config.api_key},
            stream=True,
            timeout=self.download_timeout
        )

        if response is None:
            raise EmptyResponseError("No response")

        if response.status_code >= 400:
            with response:
                body = response.text
            logger.error(f"Request failed: {body}")
            raise RemoteError(body, status_code=response.status_code)

        return response

    def download_to_stream(self, target) -> int:
        """
        Copy the translations archive into a writable binary stream.

        Args:
            target: File object the archive bytes are written to

        Returns:
            Number of bytes written

        Raises:
            EmptyResponseError: If no response is received or the transfer breaks off
            RemoteError: If the status code is 400 or above
        """
        size = 0
        with self.download_archive() as response:
            try:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        target.write(chunk)
                        size += len(chunk)
            except requests.exceptions.RequestException as e:
                logger.error(f"Download interrupted after {size} bytes: {e}")
                raise EmptyResponseError(f"Download interrupted after {size} bytes: {e}") from e

        logger.info(f"Downloaded {size} bytes")
        return size
