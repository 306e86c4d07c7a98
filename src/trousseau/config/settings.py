"""
Trousseau configuration with hybrid YAML + ENV support.

Priority: Environment variables > .env file > environment YAML >
default YAML > Pydantic defaults
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trousseau.domain.value_objects.commitment import Commitment


class TrousseauConfig(BaseSettings):
    """
    Trousseau configuration schema.

    One RPC endpoint and one commitment level; both are passed explicitly
    into the balance client.
    """

    model_config = SettingsConfigDict(
        env_prefix="TROUSSEAU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Blockchain
    solana_rpc_url: str = Field(default="https://api.devnet.solana.com")
    solana_network: str = Field(default="devnet")
    commitment: Commitment = Field(default=Commitment.CONFIRMED)
    rpc_timeout: float = Field(
        default=10.0,
        ge=0.1,
        le=120.0,
        description="Per-request RPC timeout in seconds",
    )

    # Account generation
    accounts_file: str = Field(default="accounts.json")
    accounts_count: int = Field(default=10, ge=0, le=100_000)

    # Logging
    log_level: str = Field(default="info")
    log_dir: Optional[str] = Field(default=None)

    @field_validator("solana_rpc_url")
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        """Validate RPC URL scheme."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid solana_rpc_url: {v!r} must be http(s)")
        return v

    @field_validator("solana_network")
    @classmethod
    def validate_network(cls, v: str) -> str:
        """Validate Solana network."""
        allowed = ["devnet", "testnet", "mainnet-beta"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid network. Must be one of: {allowed}")
        return v_lower

    @field_validator("commitment", mode="before")
    @classmethod
    def normalize_commitment(cls, v):
        """Accept commitment names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @field_validator("accounts_file", "log_dir")
    @classmethod
    def expand_paths(cls, v: Optional[str]) -> Optional[str]:
        """Expand home directory in paths."""
        if v:
            return os.path.expanduser(v)
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Let environment variables override values loaded from YAML."""
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> TrousseauConfig:
    """
    Load configuration from YAML files and environment variables.

    Args:
        config_file: Optional YAML path (CWD-relative or absolute) or
            filename in config/
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override ("development", "test", ...)

    Returns:
        TrousseauConfig instance

    Raises:
        FileNotFoundError: If an explicit config_file or TROUSSEAU_CONFIG
            is found neither relative to the CWD nor in config/
        pydantic.ValidationError: If a value fails validation
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("TROUSSEAU_ENV", "development")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }
    default_env_file, default_config_file = env_map.get(
        environment, (".env", f"{environment}.yaml")
    )

    if env_file is None:
        env_file = default_env_file
    if config_file is None:
        config_file = os.getenv("TROUSSEAU_CONFIG")
    required = config_file is not None
    if config_file is None:
        config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    merged_config = {}

    default_config_path = config_dir / "default.yaml"
    if default_config_path.exists():
        merged_config.update(_read_yaml(default_config_path))

    env_config_path = _resolve_config_path(config_file, config_dir)
    if env_config_path is not None:
        merged_config.update(_read_yaml(env_config_path))
    elif required:
        raise FileNotFoundError(f"Config file not found: {config_file}")

    return TrousseauConfig(**merged_config)


def _resolve_config_path(config_file: str, config_dir: Path) -> Optional[Path]:
    """Find config_file as given (CWD-relative), then under config_dir."""
    path = Path(config_file).expanduser()
    candidates = [path] if path.is_absolute() else [path, config_dir / path]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _read_yaml(path: Path) -> dict:
    with open(path, "r") as f:
        loaded = yaml.safe_load(f)
    return loaded or {}


_settings: Optional[TrousseauConfig] = None


def get_settings() -> TrousseauConfig:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: TrousseauConfig) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
