"""appcache.

Declarative configuration for offline application cache manifests: which
resources to cache, which always need the network, which fallbacks to serve
when a resource is unreachable, and any free-form manifest settings.

Public API for manifest writers and the code that declares their contents.
"""

from appcache.config import OfflineConfig, OfflineConfigBuilder
from appcache.loader import declarations_block, load_config
from appcache.models.manifest_config import ManifestDeclarations

__version__ = "0.1.0"

__all__ = [
    "ManifestDeclarations",
    "OfflineConfig",
    "OfflineConfigBuilder",
    "declarations_block",
    "load_config",
]
