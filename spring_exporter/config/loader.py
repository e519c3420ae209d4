"""Configuration loader with YAML parsing and environment variable substitution."""

import yaml
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional
from .models import ExporterConfig
from .settings import Settings


class ConfigLoader:
    """Load and validate exporter configuration."""

    @staticmethod
    def load_from_file(config_path: str) -> ExporterConfig:
        """
        Load configuration from YAML file with environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            ExporterConfig: Validated configuration object

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            pydantic.ValidationError: If configuration validation fails
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_file, 'r') as f:
            raw_config = yaml.safe_load(f) or {}

        # Substitute environment variables
        raw_config = ConfigLoader._substitute_env_vars(raw_config)

        return ExporterConfig(**raw_config)

    @staticmethod
    def load_from_env(uri: Optional[str] = None) -> ExporterConfig:
        """
        Build configuration from SPRING_EXPORTER_* environment variables.

        Args:
            uri: Endpoint URI used when SPRING_EXPORTER_URI is not set

        Returns:
            ExporterConfig: Validated configuration object

        Raises:
            ValueError: If no URI is available
            pydantic.ValidationError: If configuration validation fails
        """
        if uri is None:
            Settings.validate_required()
        prefix = Settings.PREFIX

        target: Dict[str, Any] = {
            "uri": Settings.get(f"{prefix}URI", uri, required=True),
            "namespace": Settings.get(f"{prefix}NAMESPACE") or "spring",
            "insecure": Settings.get_bool(f"{prefix}INSECURE"),
            "basic_auth_user": Settings.get(f"{prefix}BASIC_AUTH_USER"),
            "basic_auth_password": Settings.get(f"{prefix}BASIC_AUTH_PASSWORD"),
        }
        timeout = Settings.get(f"{prefix}TIMEOUT")
        if timeout:
            target["timeout_seconds"] = timeout

        server: Dict[str, Any] = {}
        if Settings.get(f"{prefix}LISTEN_ADDRESS"):
            server["listen_address"] = Settings.get(f"{prefix}LISTEN_ADDRESS")
        if Settings.get(f"{prefix}PORT"):
            server["port"] = Settings.get(f"{prefix}PORT")

        return ExporterConfig(
            target=target,
            server=server,
            logging={"level": Settings.get("LOG_LEVEL", "INFO")},
        )

    @staticmethod
    def _substitute_env_vars(obj: Any) -> Any:
        """
        Recursively substitute ${ENV_VAR} placeholders with environment values.

        Args:
            obj: Object to process (str, dict, list, or primitive)

        Returns:
            Object with environment variables substituted
        """
        if isinstance(obj, str):
            # Replace ${VAR_NAME} with os.getenv('VAR_NAME')
            pattern = r'\$\{(\w+)\}'
            return re.sub(pattern, lambda m: os.getenv(m.group(1), ''), obj)

        elif isinstance(obj, dict):
            return {k: ConfigLoader._substitute_env_vars(v) for k, v in obj.items()}

        elif isinstance(obj, list):
            return [ConfigLoader._substitute_env_vars(item) for item in obj]

        return obj
