"""Loading of the gitaudit configuration file."""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

from git_audit.config.domain.value_objects import AuditConfig

CONFIG_FILE_NAME = ".gitaudit"
CONFIG_PATH_ENV = "GITAUDIT_CONFIG"
REQUIRED_FIELDS = ("ollama_endpoint", "ollama_model")


class ConfigError(ValueError):
    """The configuration file is missing or invalid."""


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of git_audit package)
    project_root = Path(__file__).parent.parent.parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


def default_config_path() -> Path:
    """Return the config path, honouring the GITAUDIT_CONFIG override."""
    _load_env_file()

    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILE_NAME


def load_config(config_path: Path | None = None) -> AuditConfig:
    """
    Read and validate the JSON configuration file.

    Args:
        config_path: Path to the config file. Defaults to ~/.gitaudit
                     (or GITAUDIT_CONFIG when set).

    Returns:
        AuditConfig with the Ollama endpoint and model

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON, or
                     lacks one of the required fields
    """
    path = config_path or default_config_path()

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Config file not found at {path}. "
            "Please create it with 'ollama_endpoint' and 'ollama_model'"
        ) from None
    except OSError as e:
        raise ConfigError(f"Failed to open config file {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Failed to decode config file {path}: {e}. Ensure it is valid JSON"
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    missing = [
        field
        for field in REQUIRED_FIELDS
        if not isinstance(data.get(field), str) or not data[field].strip()
    ]
    if missing:
        raise ConfigError(
            f"Config file {path} must contain 'ollama_endpoint' and 'ollama_model' "
            f"(missing or empty: {', '.join(missing)})"
        )

    return AuditConfig(
        ollama_endpoint=data["ollama_endpoint"],
        ollama_model=data["ollama_model"],
    )
