"""
Build offline manifest configs from data instead of code.

Declarations can live in a JSON or YAML file (or an already-parsed mapping)
with the same five keys a manifest writer reads::

    root: /app
    cache: [index.html, style.css]
    network: [/api]
    fallback: {/: /offline.html}
    settings: [prefer-online]

The data is validated and then replayed through the normal registration
operations, so a loaded config is indistinguishable from one declared in code.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from appcache.config import OfflineConfig
from appcache.core.exceptions import ConfigLoadError, DeclarationValidationError
from appcache.core.logger import get_logger
from appcache.models.manifest_config import ManifestFileDeclarations

logger = get_logger(__name__)


def _validate(data: Any) -> ManifestFileDeclarations:
    if not isinstance(data, Mapping):
        raise DeclarationValidationError(
            f"Declarations must be a mapping, got {type(data).__name__}"
        )
    try:
        return ManifestFileDeclarations.model_validate(dict(data))
    except ValidationError as e:
        raise DeclarationValidationError(
            "Invalid manifest declarations", errors=e.errors()
        ) from e


def read_declarations(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a JSON or YAML declarations file into a plain dict.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigLoadError: If the path is not a regular file, the suffix is not
            .json/.yaml/.yml, or the file can't be read or parsed
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    if not config_file.is_file():
        raise ConfigLoadError(
            "Config path is not a file", details={"path": str(config_file)}
        )
    if config_file.suffix not in (".json", ".yaml", ".yml"):
        raise ConfigLoadError(
            "Unsupported config format. Use .json or .yaml",
            details={"path": str(config_file), "suffix": config_file.suffix},
        )

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            if config_file.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigLoadError(
            "Could not parse config file",
            details={"path": str(config_file), "error": str(e)},
        ) from e
    except OSError as e:
        raise ConfigLoadError(
            "Could not read config file",
            details={"path": str(config_file), "error": str(e)},
        ) from e

    logger.info(f"Loaded declarations from {config_path}")
    # An empty YAML document parses to None
    return data if data is not None else {}


def declarations_block(data: Mapping[str, Any]) -> Callable[[Any], None]:
    """Return a declaration block that replays ``data`` through a builder.

    ``root`` in ``data`` is ignored here; the block only registers entries, so
    it can be combined with code-declared entries under any root.
    """
    parsed = _validate(data)
    return parsed.to_declarations(root=parsed.root).apply_to


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    config_dict: Optional[Mapping[str, Any]] = None,
    *,
    root: Optional[str] = None,
) -> OfflineConfig:
    """
    Build an :class:`OfflineConfig` from a declarations file or mapping.

    Args:
        config_path: Path to a JSON/YAML declarations file
        config_dict: Already-parsed declarations
        root: Overrides the ``root`` key of the declarations

    Returns:
        A populated OfflineConfig

    Raises:
        FileNotFoundError: If config_path doesn't exist
        ConfigLoadError: If not exactly one source is given or the file can't be read
        DeclarationValidationError: If the declarations are malformed or no root is known

    Example:
        >>> config = load_config(config_dict={"root": "/app", "cache": ["index.html"]})
        >>> config.cache_entries
        ['index.html']
    """
    if (config_path is None) == (config_dict is None):
        raise ConfigLoadError("Provide exactly one of config_path or config_dict")

    if config_path is not None:
        data: Mapping[str, Any] = read_declarations(config_path)
    else:
        data = config_dict  # type: ignore[assignment]
        logger.info("Using provided declarations dictionary")

    parsed = _validate(data)
    effective_root = root if root is not None else parsed.root
    if effective_root is None:
        raise DeclarationValidationError(
            "No root given: set 'root' in the declarations or pass root="
        )

    declarations = parsed.to_declarations(root=effective_root)
    config = OfflineConfig(effective_root, declarations.apply_to)
    logger.info(
        f"Built offline config for root={effective_root!r} "
        f"({len(config.cache_entries)} cache, {len(config.network_entries)} network, "
        f"{len(config.fallback_entries)} fallback, {len(config.settings_entries)} settings)"
    )
    return config
