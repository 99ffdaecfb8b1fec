"""
Crowdin Sync Client - Configuration Manager

Handles loading and saving client configuration from/to config.json.
Manages OS credential store integration for API key storage.

Author: Crowdin Sync Project
"""

import copy
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any

from exceptions import ConfigError
from models import ClientConfig, DEFAULT_ENDPOINT_URL

# Configure logging
logger = logging.getLogger(__name__)


KEYRING_SERVICE = "CrowdinSync"
API_KEY_ENV_VAR = "CROWDIN_API_KEY"

# Default configuration values
DEFAULT_CONFIG = {
    "endpoint_url": DEFAULT_ENDPOINT_URL,
    "project_identifier": None,  # API key itself lives in the OS credential store
    "upload": {
        "filename": None,  # Remote name, may contain #GIT_BRANCH#
        "src_file": None
    },
    "download": {
        "output_dir": None
    },
    "request_timeout": 30,
    "download_timeout": 300,
    "log_level": "INFO",
    "log_retention_days": 30
}


def get_base_dir() -> Path:
    """Directory holding config.json and the logs folder."""
    if getattr(sys, 'frozen', False):
        # Running as compiled executable
        return Path(sys.executable).parent
    # Running as script
    return Path.cwd()


class ConfigManager:
    """
    Manages client configuration and credentials.

    Responsibilities:
    - Load/save config.json next to the executable (same location as logs folder)
    - Store/retrieve the project API key from the OS credential store via keyring
    - Build the immutable ClientConfig handed to the API client
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional explicit path to the configuration file
        """
        if config_file:
            self.config_file = Path(config_file)
        else:
            self.config_file = get_base_dir() / "config.json"
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from config.json.
        Creates default config if file doesn't exist.

        Returns:
            Configuration dictionary

        Raises:
            ConfigError: If the file exists but is not valid JSON
        """
        if self.config_file.exists():
            logger.debug(f"Loading configuration from {self.config_file}")
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self.config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid configuration file {self.config_file}: {e}") from e

            # Merge with defaults for any missing keys
            for key, value in DEFAULT_CONFIG.items():
                if key not in self.config:
                    self.config[key] = copy.deepcopy(value)
                elif isinstance(value, dict) and isinstance(self.config[key], dict):
                    for sub_key, sub_value in value.items():
                        self.config[key].setdefault(sub_key, sub_value)
            logger.info("Configuration loaded successfully")
        else:
            logger.info(f"Configuration file not found, creating default at {self.config_file}")
            self.config = copy.deepcopy(DEFAULT_CONFIG)
            self.save_config()

        return self.config

    def save_config(self):
        """Save current configuration to config.json."""
        logger.debug(f"Saving configuration to {self.config_file}")
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)
        logger.debug("Configuration saved successfully")

    def get(self, key: str, default=None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        """
        Set configuration value and save to file.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self.config[key] = value
        self.save_config()

    def get_job_options(self, job: str) -> Dict[str, Any]:
        """
        Get the per-job section ("upload" or "download").

        Returns:
            Copy of the section, empty if absent
        """
        section = self.config.get(job) or {}
        return dict(section)

    def store_api_key(self, project_identifier: str, api_key: str):
        """
        Store the project API key in the OS credential store.

        Args:
            project_identifier: Project the key belongs to (stored in config.json)
            api_key: Key to store (securely in OS credential store)
        """
        import keyring

        logger.info(f"Storing API key for project: {project_identifier}")

        self.set("project_identifier", project_identifier)
        keyring.set_password(KEYRING_SERVICE, project_identifier, api_key)

        logger.debug("API key stored successfully")

    def get_api_key(self, project_identifier: Optional[str], override: Optional[str] = None) -> Optional[str]:
        """
        Resolve the API key.

        Priority: explicit override > CROWDIN_API_KEY environment variable >
        OS credential store.

        Args:
            project_identifier: Project whose stored key should be looked up
            override: Key given on the command line

        Returns:
            API key or None if not found
        """
        if override:
            return override

        env_key = os.environ.get(API_KEY_ENV_VAR)
        if env_key:
            logger.debug(f"Using API key from {API_KEY_ENV_VAR}")
            return env_key

        if not project_identifier:
            logger.warning("No project identifier configured, cannot look up stored API key")
            return None

        import keyring

        logger.debug("Retrieving API key from OS credential store")
        api_key = keyring.get_password(KEYRING_SERVICE, project_identifier)
        if not api_key:
            logger.warning(f"No API key found in credential store for project: {project_identifier}")
            return None

        return api_key

    def build_client_config(self, api_key: Optional[str] = None,
                            project_identifier: Optional[str] = None,
                            endpoint_url: Optional[str] = None) -> ClientConfig:
        """
        Build the immutable ClientConfig from overrides and stored settings.

        Raises:
            ConfigError: If the API key, endpoint or project is missing
        """
        project_identifier = project_identifier or self.get("project_identifier")
        endpoint_url = endpoint_url or self.get("endpoint_url") or DEFAULT_ENDPOINT_URL
        resolved_key = self.get_api_key(project_identifier, api_key)

        return ClientConfig(
            endpoint_url=endpoint_url,
            api_key=resolved_key or "",
            project_identifier=project_identifier or ""
        )
