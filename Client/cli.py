"""
Crowdin Sync Client - CLI Mode Module

Implements command-line jobs for build scripts and CI.
Loads configuration, runs the requested job, and logs to a timestamped file.
This is the only place errors are caught: every failure of either job is
logged here and mapped to an exit code.

Author: Crowdin Sync Project
"""

import re
import sys
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any

from managers import ConfigManager, GitBranchResolver
from managers.config_manager import get_base_dir
from models import UploadJob, DownloadJob
from api import CrowdinAPI
from exceptions import CrowdinError, ConfigError
from operations import TranslationOperations


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_AUTH_ERROR = 3
EXIT_INVALID_JOB = 4

JOBS = ('upload', 'download', 'store-key')


class ApiKeyFilter(logging.Filter):
    """Masks the `key` query parameter in log records."""

    KEY_PATTERN = re.compile(r"(\bkey=)[^&\s\"']+")

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = self.KEY_PATTERN.sub(r"\1***", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_cli_logging(config_manager: ConfigManager, verbose: bool = False,
                      log_dir: Optional[Path] = None) -> Path:
    """
    Setup logging for CLI mode with timestamped log file.

    Creates log file with format: crowdin-sync-YYYY-MM-DD-HH-MM-SS.log
    in a "logs" subdirectory next to the executable or in the current directory.

    Args:
        config_manager: ConfigManager instance for log settings
        verbose: Force DEBUG level regardless of config
        log_dir: Optional directory overriding the default "logs" location

    Returns:
        Path to the created log file
    """
    log_level = "DEBUG" if verbose else config_manager.get("log_level", "INFO")

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_filename = f"crowdin-sync-{timestamp}.log"

    if log_dir is None:
        log_dir = get_base_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / log_filename

    handlers = [
        logging.FileHandler(log_file),
        logging.StreamHandler(sys.stdout)  # Also output to console
    ]
    for handler in handlers:
        handler.addFilter(ApiKeyFilter())

    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

    # urllib3 debug lines print request paths, which carry the API key
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Crowdin Sync CLI Mode - Log file: {log_file}")
    logger.info(f"Log level: {log_level}")

    return log_file


def cleanup_old_logs(config_manager: ConfigManager, current_log: Path):
    """
    Delete log files older than retention period.

    Args:
        config_manager: ConfigManager instance for retention settings
        current_log: Path to current log file (don't delete this)
    """
    logger = logging.getLogger(__name__)
    retention_days = config_manager.get("log_retention_days", 30)

    if retention_days <= 0:
        return  # Retention disabled

    log_dir = current_log.parent
    cutoff_time = datetime.now().timestamp() - (retention_days * 86400)

    deleted_count = 0
    for log_file in log_dir.glob("crowdin-sync-*.log"):
        if log_file == current_log:
            continue

        try:
            if log_file.stat().st_mtime < cutoff_time:
                log_file.unlink()
                deleted_count += 1
        except OSError as e:
            logger.warning(f"Failed to delete old log file {log_file}: {e}")

    if deleted_count > 0:
        logger.info(f"Deleted {deleted_count} old log file(s)")


def build_job(operation: str, config_manager: ConfigManager, options: Dict[str, Any]):
    """
    Build the job for an operation from config sections and command-line overrides.

    Raises:
        ConfigError: If required job settings are missing
    """
    if operation == "upload":
        return UploadJob.from_options(
            config_manager.get_job_options("upload"),
            src_file=options.get("src_file"),
            filename=options.get("filename")
        )
    return DownloadJob.from_options(
        config_manager.get_job_options("download"),
        output_dir=options.get("output_dir")
    )


def store_api_key(config_manager: ConfigManager, options: Dict[str, Any]) -> int:
    """Save the API key to the OS credential store."""
    logger = logging.getLogger(__name__)

    api_key = options.get("api_key")
    project_identifier = options.get("project_identifier") or config_manager.get("project_identifier")
    if not api_key or not project_identifier:
        logger.error("store-key needs --api-key and a project identifier")
        return EXIT_CONFIG_ERROR

    config_manager.store_api_key(project_identifier, api_key)
    logger.info(f"API key stored for project {project_identifier}")
    return EXIT_SUCCESS


def run_cli_operation(operation: str, options: Optional[Dict[str, Any]] = None) -> int:
    """
    Execute a CLI job.

    Process:
    1. Load configuration
    2. Setup logging to timestamped file
    3. Resolve API key and build the client configuration
    4. Execute the requested job
    5. Return appropriate exit code

    Args:
        operation: Job to perform ("upload", "download" or "store-key")
        options: Command-line overrides (api_key, project_identifier,
                 endpoint_url, config, src_file, filename, output_dir, verbose)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    options = options or {}
    logger = None

    try:
        config_mgr = ConfigManager(options.get("config"))
        config_mgr.load_config()
        log_file = setup_cli_logging(config_mgr, verbose=options.get("verbose", False),
                                     log_dir=options.get("log_dir"))
        logger = logging.getLogger(__name__)

        cleanup_old_logs(config_mgr, log_file)

        if operation not in JOBS:
            logger.error(f"Unknown job: {operation}")
            return EXIT_INVALID_JOB

        if operation == "store-key":
            return store_api_key(config_mgr, options)

        logger.info("=" * 60)
        logger.info(f"Starting Crowdin Sync: {operation.upper()}")
        logger.info("=" * 60)

        project_identifier = options.get("project_identifier") or config_mgr.get("project_identifier")
        api_key = config_mgr.get_api_key(project_identifier, options.get("api_key"))
        if not api_key:
            logger.error("No API key found. Pass --api-key, set CROWDIN_API_KEY, or run 'store-key' once.")
            return EXIT_AUTH_ERROR

        client_config = config_mgr.build_client_config(
            api_key=api_key,
            project_identifier=project_identifier,
            endpoint_url=options.get("endpoint_url")
        )
        logger.info(f"Project: {client_config.project_identifier}")

        job = build_job(operation, config_mgr, options)

        def cli_progress_callback(message: str, current: int, total: int):
            logger.info(f"[{current}/{total}] {message}")

        resolver = None
        if isinstance(job, UploadJob) and job.uses_branch_placeholder:
            resolver = GitBranchResolver(options.get("repo_path"))

        with CrowdinAPI(client_config,
                        timeout=config_mgr.get("request_timeout", 30),
                        download_timeout=config_mgr.get("download_timeout", 300)) as api_client:
            translation_ops = TranslationOperations(api_client)
            translation_ops.run(
                job,
                branch_resolver=resolver,
                progress_callback=cli_progress_callback
            )

        logger.info("=" * 60)
        logger.info(f"{operation.upper()} COMPLETED SUCCESSFULLY")
        logger.info("=" * 60)
        return EXIT_SUCCESS

    except ConfigError as e:
        if logger:
            logger.error(f"Configuration error: {e}")
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except CrowdinError as e:
        if logger:
            logger.error(f"{operation.upper()} FAILED: {type(e).__name__}: {e}")
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        if logger:
            logger.warning("Operation cancelled by user (Ctrl+C)")
        else:
            print("\nOperation cancelled by user", file=sys.stderr)
        return EXIT_FAILURE

    except Exception as e:
        if logger:
            logger.exception(f"Unexpected error: {e}")
        else:
            print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_FAILURE
