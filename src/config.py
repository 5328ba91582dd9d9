"""
Configuration for ContextCrafter.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from src.utils.exceptions import ConfigurationError


class CollectionConfig(BaseModel):
    """Link-graph collection configuration."""

    # Clamped to [1, 3] when a collection runs
    max_depth: int = 3
    include_forward_links: bool = True
    include_backlinks: bool = True
    # Folder names or path prefixes
    exclude_folders: list[str] = Field(default_factory=list)
    # Document kinds that may be visited (file extensions, no dot)
    traversable_extensions: list[str] = Field(default_factory=lambda: ["md"])


class ContentMatchConfig(BaseModel):
    """Content-based relevance collection configuration."""

    similarity_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    max_results: int = Field(default=10, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    collection: CollectionConfig = Field(default_factory=CollectionConfig)
    content_match: ContentMatchConfig = Field(default_factory=ContentMatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            CRAFTER_LINK_DEPTH: Traversal depth (clamped to 1-3)
            CRAFTER_INCLUDE_FORWARD_LINKS: Follow outgoing links
            CRAFTER_INCLUDE_BACKLINKS: Follow incoming links
            CRAFTER_EXCLUDE_FOLDERS: Comma-separated folders to skip
            CRAFTER_TRAVERSABLE_EXTENSIONS: Comma-separated document kinds
            CRAFTER_SIMILARITY_THRESHOLD: Minimum relevance score (0-1)
            CRAFTER_MAX_RESULTS: Maximum content matches
            CRAFTER_LOG_LEVEL: Log level

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            # Convert boolean strings
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            # Convert numeric strings
            try:
                if isinstance(default, int):
                    return int(value)
                if isinstance(default, float):
                    return float(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {key}: {value!r}", {"key": key, "value": value}
                ) from e
            # Comma-separated lists
            if isinstance(default, list):
                return [item.strip() for item in value.split(",") if item.strip()]
            return value

        return cls(
            collection=CollectionConfig(
                max_depth=get_env("CRAFTER_LINK_DEPTH", 3),
                include_forward_links=get_env("CRAFTER_INCLUDE_FORWARD_LINKS", True),
                include_backlinks=get_env("CRAFTER_INCLUDE_BACKLINKS", True),
                exclude_folders=get_env("CRAFTER_EXCLUDE_FOLDERS", []),
                traversable_extensions=get_env("CRAFTER_TRAVERSABLE_EXTENSIONS", ["md"]),
            ),
            content_match=ContentMatchConfig(
                similarity_threshold=get_env("CRAFTER_SIMILARITY_THRESHOLD", 0.5),
                max_results=get_env("CRAFTER_MAX_RESULTS", 10),
            ),
            logging=LoggingConfig(
                level=get_env("CRAFTER_LOG_LEVEL", "INFO"),
                log_to_file=get_env("CRAFTER_LOG_TO_FILE", False),
                log_dir=get_env("CRAFTER_LOG_DIR", "logs"),
                file_rotation=get_env("CRAFTER_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("CRAFTER_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("CRAFTER_LOG_COMPRESSION", "zip"),
                serialize=get_env("CRAFTER_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Merge: env vars override YAML
        final_dict = {**config_dict}

        # Apply env overrides (non-default values)
        default = cls()
        if env_config.collection != default.collection:
            final_dict["collection"] = env_config.collection.model_dump()
        if env_config.content_match != default.content_match:
            final_dict["content_match"] = env_config.content_match.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
