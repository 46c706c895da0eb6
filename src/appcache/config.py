"""Declaration accumulator for offline application cache manifests.

An :class:`OfflineConfig` collects what a manifest should contain: resources to
cache, resources that always go to the network, fallback substitutes for
unreachable resources, and free-form settings. It is filled in a single
configuration pass and then read by whatever writes the manifest text.

Example:
    >>> def declare(m):
    ...     m.cache("index.html", "style.css")
    ...     m.network("/api")
    ...     m.fallback({"/": "/offline.html"})
    >>> config = OfflineConfig("/app", declare)
    >>> config.cache_entries
    ['index.html', 'style.css']

Instances are not thread-safe: one writer, and no readers until the
configuration pass has finished.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional

from appcache.core.logger import get_logger, push_root, reset_root

if TYPE_CHECKING:
    from appcache.models.manifest_config import ManifestDeclarations

logger = get_logger(__name__)

DeclarationBlock = Callable[["OfflineConfigBuilder"], Any]


class OfflineConfigBuilder:
    """Registration surface handed to a declaration block.

    Only the four registration operations and a read-only ``root`` are exposed,
    so a block cannot rebind the root or reach other accumulator state.
    """

    __slots__ = ("_config",)

    def __init__(self, config: "OfflineConfig"):
        self._config = config

    @property
    def root(self) -> Any:
        return self._config.root

    def cache(self, *names: Any) -> "OfflineConfigBuilder":
        self._config.cache(*names)
        return self

    def network(self, *names: Any) -> "OfflineConfigBuilder":
        self._config.network(*names)
        return self

    def fallback(self, mapping: Optional[Mapping[Any, Any]] = None) -> "OfflineConfigBuilder":
        self._config.fallback(mapping)
        return self

    def settings(self, *options: Any) -> "OfflineConfigBuilder":
        self._config.settings(*options)
        return self


class OfflineConfig:
    """Accumulates cache, network, fallback and settings declarations.

    Args:
        root: Base path the declared resource names are relative to. Stored
            as given.
        block: Optional callable invoked once with an
            :class:`OfflineConfigBuilder` before the constructor returns.
    """

    def __init__(self, root: Any, block: Optional[DeclarationBlock] = None):
        self._cache: List[Any] = []
        self._network: List[Any] = []
        self._fallback: Dict[Any, Any] = {}
        self._settings: List[Any] = []
        self._root = root

        if block is not None:
            token = push_root(root)
            try:
                block(OfflineConfigBuilder(self))
            finally:
                reset_root(token)
            logger.debug(
                "Declared %d cache, %d network, %d fallback, %d settings entries",
                len(self._cache),
                len(self._network),
                len(self._fallback),
                len(self._settings),
            )

    # --- registration ---

    def cache(self, *names: Any) -> "OfflineConfig":
        self._cache.extend(names)
        logger.debug("cache += %r", names)
        return self

    def network(self, *names: Any) -> "OfflineConfig":
        self._network.extend(names)
        logger.debug("network += %r", names)
        return self

    def fallback(self, mapping: Optional[Mapping[Any, Any]] = None) -> "OfflineConfig":
        """Merge ``mapping`` into the fallback table; later values win."""
        if mapping:
            items = dict(mapping)
            self._fallback.update(items)
            logger.debug("fallback |= %r", items)
        return self

    def settings(self, *options: Any) -> "OfflineConfig":
        self._settings.extend(options)
        logger.debug("settings += %r", options)
        return self

    # --- read access for manifest writers ---

    @property
    def root(self) -> Any:
        return self._root

    @property
    def cache_entries(self) -> List[Any]:
        return self._cache

    @property
    def network_entries(self) -> List[Any]:
        return self._network

    @property
    def fallback_entries(self) -> Dict[Any, Any]:
        return self._fallback

    @property
    def settings_entries(self) -> List[Any]:
        # `settings` is the registration method, so the list is read here.
        return self._settings

    def snapshot(self) -> "ManifestDeclarations":
        """Return a frozen copy of the current declarations."""
        from appcache.models.manifest_config import ManifestDeclarations

        return ManifestDeclarations.from_config(self)

    def __repr__(self) -> str:
        return (
            f"OfflineConfig(root={self._root!r}, cache={self._cache!r}, "
            f"network={self._network!r}, fallback={self._fallback!r}, "
            f"settings={self._settings!r})"
        )
