"""
Crowdin Sync Client - Client Configuration Model

Contains the immutable connection settings passed to every API call.

Author: Crowdin Sync Project
"""

from dataclasses import dataclass

from exceptions import ConfigError


DEFAULT_ENDPOINT_URL = "https://api.crowdin.com/api"


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for one Crowdin project.

    Attributes:
        endpoint_url: Base URL of the API (e.g., "https://api.crowdin.com/api")
        api_key: Project API key, sent as the `key` query parameter
        project_identifier: Crowdin project identifier used in every URL
    """
    endpoint_url: str
    api_key: str
    project_identifier: str

    def __post_init__(self):
        if not self.api_key:
            raise ConfigError("Missing apiKey")
        if not self.endpoint_url:
            raise ConfigError("Missing endpointUrl")
        if not self.project_identifier:
            raise ConfigError("Missing project identifier")

        # Trailing slashes would produce '//project' in every URL
        object.__setattr__(self, "endpoint_url", self.endpoint_url.rstrip("/"))

    def __repr__(self) -> str:
        return (f"ClientConfig(endpoint_url={self.endpoint_url!r}, api_key='***', "
                f"project_identifier={self.project_identifier!r})")
