"""Global configuration management for git-relax.

Handles user-level configuration stored in ~/.git-relax/config.yaml:
- base_branch: Default base branch for pull requests
- timeout: Request timeout (seconds) for LLM calls

API keys are not stored here; they come from the environment or a .env file.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".git-relax"


def get_global_config_dir() -> Path:
    """Get the global git-relax configuration directory.

    Returns:
        Path to ~/.git-relax/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.git-relax/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.git-relax/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.git-relax/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.git-relax/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_base_branch() -> Optional[str]:
    """Get the configured default base branch.

    Returns:
        Branch name, or None if not configured.
    """
    config = load_global_config()
    return config.get("base_branch")


def set_base_branch(branch: str) -> None:
    """Set the default base branch for pull requests.

    Args:
        branch: Branch name (e.g., "main", "develop").
    """
    config = load_global_config()
    config["base_branch"] = branch
    save_global_config(config)


def get_timeout() -> Optional[float]:
    """Get the LLM request timeout from global config.

    Returns:
        Timeout in seconds, or None if not configured.

    Raises:
        GlobalConfigError: If the configured value is not a positive number.
    """
    config = load_global_config()
    value = config.get("timeout")
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise GlobalConfigError(f"Invalid timeout in config: {value!r}")
    if timeout <= 0:
        raise GlobalConfigError(f"Invalid timeout in config: {value!r}")
    return timeout


def set_timeout(seconds: float) -> None:
    """Set the LLM request timeout.

    Args:
        seconds: Timeout in seconds.
    """
    config = load_global_config()
    config["timeout"] = seconds
    save_global_config(config)


def is_configured() -> bool:
    """Check if a config file exists.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
