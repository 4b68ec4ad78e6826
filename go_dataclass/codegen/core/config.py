"""
Configuration management for code generation.

Handles loading and merging configuration from defaults, JSON files,
environment variables and explicit overrides.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional, Union, Mapping
from dataclasses import dataclass, field, fields, asdict

from .templates import BUILTIN_TEMPLATES


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


# Environment toggles understood by the tool
ENV_DEBUG = "DATACLASS_DEBUG"
ENV_STDOUT = "DATACLASS_STDOUT"

FIELD_SEPARATOR = "|"


@dataclass
class GeneratorConfig:
    """Configuration for the dataclass generator."""

    # Output settings
    output_file: Optional[str] = None
    package_name: Optional[str] = None  # detected from the package when None
    stdout: bool = False

    # Formatter
    goimports: str = "goimports"

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = True

    # Templates replacing the built-ins, keyed by name (e.g. "struct.go.j2")
    templates: Dict[str, str] = field(default_factory=dict)

    # Input grammar
    field_separator: str = FIELD_SEPARATOR

    # Diagnostics
    debug: bool = False

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)


# Expected JSON types of the known settings
_FIELD_TYPES: Dict[str, tuple] = {
    "output_file": (str, type(None)),
    "package_name": (str, type(None)),
    "stdout": (bool,),
    "goimports": (str,),
    "indent_size": (int,),
    "use_tabs": (bool,),
    "field_separator": (str,),
    "debug": (bool,),
    "templates": (dict,),
    "custom": (dict,),
}


def _type_names(types: tuple) -> str:
    return " or ".join("null" if t is type(None) else t.__name__ for t in types)


def _check_value(key: str, value: Any):
    """Raise ConfigError unless value has the type the setting expects."""
    expected = _FIELD_TYPES[key]
    # bool is an int subclass; a flag is never a size
    if not isinstance(value, expected) or (isinstance(value, bool) and bool not in expected):
        raise ConfigError(
            f"Invalid value for {key}: expected {_type_names(expected)}, "
            f"got {type(value).__name__}"
        )
    if key == "templates":
        for name, content in value.items():
            if not isinstance(content, str):
                raise ConfigError(
                    f"Invalid template {name}: expected str, got {type(content).__name__}"
                )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration manager.

        Args:
            environ: Environment to read toggles from (defaults to os.environ)
        """
        self._environ = os.environ if environ is None else environ
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration.

        Layers, later wins: defaults, JSON file, environment, overrides.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["custom"] = {}
        base_config["templates"] = {}

        if config_file:
            base_config.update(self._load_config_file(config_file))

        base_config.update(self._environment_overrides())

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _environment_overrides(self) -> Dict[str, Any]:
        """Read the DATACLASS_* toggles; any non-empty value enables them."""
        overrides = {}
        if self._environ.get(ENV_DEBUG):
            overrides["debug"] = True
        if self._environ.get(ENV_STDOUT):
            overrides["stdout"] = True
        return overrides

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        for key, value in config_args.items():
            _check_value(key, value)

        # Unknown keys end up in custom
        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}") from e


def validate_config(config: GeneratorConfig) -> list[str]:
    """
    Validate configuration.

    Returns:
        List of validation warnings
    """
    warnings = []

    if not config.use_tabs and config.indent_size < 1:
        warnings.append(f"Invalid indent_size: {config.indent_size}")

    if not config.field_separator:
        warnings.append("Empty field_separator; the whole field list is one field")
    elif config.field_separator.isspace() or " " in config.field_separator:
        warnings.append(
            f"field_separator {config.field_separator!r} clashes with the "
            "space between field name and type"
        )

    if config.package_name and not config.package_name.isidentifier():
        warnings.append(f"Invalid Go package name: {config.package_name}")

    if not config.goimports:
        warnings.append("No goimports executable configured")

    unknown = sorted(set(config.templates) - set(BUILTIN_TEMPLATES))
    if unknown:
        warnings.append(f"Unknown templates ignored: {', '.join(unknown)}")

    return warnings


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None,
                environ: Optional[Mapping[str, str]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Merged configuration
    """
    manager = ConfigManager(environ)
    return manager.get_config(custom_config, config_file)
