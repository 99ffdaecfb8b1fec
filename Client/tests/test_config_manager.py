"""
Tests for configuration handling in Crowdin Sync Client

Tests config.json defaults, merging and API key resolution.
"""

import json
import sys
from pathlib import Path

import keyring
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exceptions import ConfigError
from managers import ConfigManager, DEFAULT_CONFIG, KEYRING_SERVICE, API_KEY_ENV_VAR


@pytest.fixture
def stored_keys(monkeypatch):
    """Replace the OS credential store with a dict."""
    store = {}
    monkeypatch.setattr(keyring, "get_password", lambda service, user: store.get((service, user)))
    monkeypatch.setattr(keyring, "set_password",
                        lambda service, user, password: store.__setitem__((service, user), password))
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
    return store


def test_creates_default_config(tmp_path):
    """Test that a missing file is created with defaults"""
    config_file = tmp_path / "config.json"
    manager = ConfigManager(str(config_file))

    config = manager.load_config()

    assert config == DEFAULT_CONFIG
    assert json.loads(config_file.read_text()) == DEFAULT_CONFIG
    assert config["endpoint_url"] == "https://api.crowdin.com/api"


def test_merges_missing_keys(tmp_path):
    """Test that partial files are completed from defaults"""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "project_identifier": "my-project",
        "upload": {"src_file": "locale/app.pot"}
    }))
    manager = ConfigManager(str(config_file))

    manager.load_config()

    assert manager.get("project_identifier") == "my-project"
    assert manager.get("log_level") == "INFO"
    assert manager.get_job_options("upload") == {"src_file": "locale/app.pot", "filename": None}
    assert manager.get_job_options("download") == {"output_dir": None}


def test_defaults_are_not_shared(tmp_path):
    """Test that editing a loaded config leaves DEFAULT_CONFIG alone"""
    manager = ConfigManager(str(tmp_path / "config.json"))
    manager.load_config()

    manager.config["upload"]["filename"] = "changed.pot"

    assert DEFAULT_CONFIG["upload"]["filename"] is None


def test_invalid_json(tmp_path):
    """Test unreadable configuration files"""
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")

    with pytest.raises(ConfigError):
        ConfigManager(str(config_file)).load_config()


def test_api_key_priority(tmp_path, monkeypatch, stored_keys):
    """Test override > environment > credential store"""
    manager = ConfigManager(str(tmp_path / "config.json"))
    manager.load_config()
    stored_keys[(KEYRING_SERVICE, "my-project")] = "from-keyring"

    assert manager.get_api_key("my-project") == "from-keyring"

    monkeypatch.setenv(API_KEY_ENV_VAR, "from-env")
    assert manager.get_api_key("my-project") == "from-env"

    assert manager.get_api_key("my-project", override="from-flag") == "from-flag"


def test_api_key_missing(tmp_path, stored_keys):
    """Test lookups without any stored key"""
    manager = ConfigManager(str(tmp_path / "config.json"))
    manager.load_config()

    assert manager.get_api_key("my-project") is None
    assert manager.get_api_key(None) is None


def test_store_api_key(tmp_path, stored_keys):
    """Test saving the key to the credential store"""
    config_file = tmp_path / "config.json"
    manager = ConfigManager(str(config_file))
    manager.load_config()

    manager.store_api_key("my-project", "secret")

    assert stored_keys[(KEYRING_SERVICE, "my-project")] == "secret"
    assert json.loads(config_file.read_text())["project_identifier"] == "my-project"
    assert "secret" not in config_file.read_text()


def test_build_client_config(tmp_path, stored_keys):
    """Test building connection settings from stored values"""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"project_identifier": "my-project"}))
    manager = ConfigManager(str(config_file))
    manager.load_config()
    stored_keys[(KEYRING_SERVICE, "my-project")] = "secret"

    config = manager.build_client_config(endpoint_url="https://crowdin.example.com/api/")

    assert config.api_key == "secret"
    assert config.project_identifier == "my-project"
    assert config.endpoint_url == "https://crowdin.example.com/api"


def test_build_client_config_without_key(tmp_path, stored_keys):
    """Test that a missing key fails construction"""
    manager = ConfigManager(str(tmp_path / "config.json"))
    manager.load_config()

    with pytest.raises(ConfigError):
        manager.build_client_config(project_identifier="my-project")
