"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class GenerationOptions:
    """Options that shape the text of a generated class."""

    package_name: str = ""  # Empty omits the package declaration
    include_query_accessors: bool = False

    # Code style settings
    line_ending: str = "\n"
    timestamp_format: str = "%d %b %Y %H:%M:%S"

    # Names the generated query accessors rely on
    data_access_class: str = "Database"
    data_access_method: str = "executeQuery"
    fetch_interface: str = "FetchDatabaseRecords"


@dataclass
class RunConfig:
    """Configuration for a whole generation run."""

    options: GenerationOptions = field(default_factory=GenerationOptions)
    output_dir: str = "generated"
    name_separator: str = "_"
    unknown_type_policy: str = "abort"  # abort, skip
    max_workers: int = 1

    # Connection settings, see schema2class.database.DBConfig
    database: Dict[str, Any] = field(default_factory=dict)


_OPTION_FIELDS = {f.name for f in fields(GenerationOptions)}
_RUN_FIELDS = {f.name for f in fields(RunConfig)} - {"options"}

_JAVA_PACKAGE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")
_JAVA_NAME = re.compile(r"^[A-Za-z_$][\w$]*$")


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "package_name": "",
            "include_query_accessors": False,
            "output_dir": "generated",
            "name_separator": "_",
            "unknown_type_policy": "abort",
            "max_workers": 1,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> RunConfig:
        """
        Get complete run configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = dict(self._defaults)

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides (None means "not given")
        for key, value in (custom_config or {}).items():
            if value is None:
                continue
            current = base_config.get(key)
            if (
                key == "database"
                and isinstance(current, dict)
                and isinstance(value, dict)
            ):
                # Connection overrides refine the file's settings
                base_config[key] = {**current, **value}
            else:
                base_config[key] = value

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> RunConfig:
        """Convert dictionary to RunConfig instance."""
        option_args = {}
        run_args = {}
        unknown = []

        for key, value in config_dict.items():
            if key in _OPTION_FIELDS:
                option_args[key] = value
            elif key in _RUN_FIELDS:
                run_args[key] = value
            else:
                unknown.append(key)

        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        if "database" in run_args and not isinstance(run_args["database"], dict):
            raise ConfigError("'database' must be a JSON object")

        try:
            max_workers = int(run_args.get("max_workers", 1))
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid max_workers: {run_args.get('max_workers')}")
        if max_workers < 1:
            raise ConfigError(f"max_workers must be at least 1, got {max_workers}")
        run_args["max_workers"] = max_workers

        option_args["include_query_accessors"] = _as_bool(
            option_args.get("include_query_accessors", False)
        )

        return RunConfig(options=GenerationOptions(**option_args), **run_args)

    def save_config(self, config: RunConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config.options)
        config_dict.update(
            {
                "output_dir": config.output_dir,
                "name_separator": config.name_separator,
                "unknown_type_policy": config.unknown_type_policy,
                "max_workers": config.max_workers,
            }
        )
        if config.database:
            config_dict["database"] = config.database

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def validate_config(self, config: RunConfig) -> List[str]:
        """
        Validate a run configuration.

        Returns:
            List of validation warnings/errors
        """
        warnings = []
        options = config.options

        if options.package_name and not _JAVA_PACKAGE.match(options.package_name):
            warnings.append(f"Invalid Java package name: {options.package_name}")

        if options.line_ending not in {"\n", "\r\n"}:
            warnings.append(f"Invalid line_ending: {options.line_ending!r}")

        for key in ("data_access_class", "data_access_method", "fetch_interface"):
            value = getattr(options, key)
            if not _JAVA_NAME.match(value):
                warnings.append(f"Invalid {key}: {value}")

        if config.unknown_type_policy not in {"abort", "skip"}:
            warnings.append(f"Invalid unknown_type_policy: {config.unknown_type_policy}")

        if len(config.name_separator) > 1:
            warnings.append(
                f"name_separator should be a single character: {config.name_separator!r}"
            )

        return warnings


def _as_bool(value: Any) -> bool:
    """Accept JSON booleans plus the "1"/"0" style of property files."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> RunConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

