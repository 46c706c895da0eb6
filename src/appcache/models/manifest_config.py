"""Declaration models shared by manifest writers and the declaration loader.

``ManifestDeclarations`` is the read-only view a manifest writer consumes.
``ManifestFileDeclarations`` is the stricter shape accepted from JSON/YAML
files, where every entry has to be a string.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ManifestDeclarations(BaseModel):
    """Frozen copy of an accumulator's declarations.

    Values are not validated: whatever was declared is carried through and
    left for the manifest writer to reject. Sequences are stored as tuples;
    ``fallback`` is a private dict copy, so mutating it never reaches the
    accumulator it was taken from.
    """

    model_config = ConfigDict(frozen=True)

    root: Any
    cache: Tuple[Any, ...] = ()
    network: Tuple[Any, ...] = ()
    fallback: Dict[Any, Any] = Field(default_factory=dict)
    settings: Tuple[Any, ...] = ()

    @classmethod
    def from_config(cls, config: Any) -> "ManifestDeclarations":
        return cls(
            root=config.root,
            cache=tuple(config.cache_entries),
            network=tuple(config.network_entries),
            fallback=dict(config.fallback_entries),
            settings=tuple(config.settings_entries),
        )

    def apply_to(self, builder: Any) -> None:
        """Replay these declarations through ``builder``'s registration methods.

        Usable directly as a declaration block:
        ``OfflineConfig(decl.root, decl.apply_to)``.
        """
        builder.cache(*self.cache)
        builder.network(*self.network)
        builder.fallback(self.fallback)
        builder.settings(*self.settings)


class ManifestFileDeclarations(BaseModel):
    """Declarations as written in a config file."""

    model_config = ConfigDict(extra="forbid")

    root: Optional[str] = None
    cache: List[str] = Field(default_factory=list)
    network: List[str] = Field(default_factory=list)
    fallback: Dict[str, str] = Field(default_factory=dict)
    settings: List[str] = Field(default_factory=list)

    @field_validator("cache", "network", "settings", mode="before")
    @classmethod
    def _wrap_single_entry(cls, v: Any) -> Any:
        # Allow `cache: index.html` as shorthand for a one-element list
        if isinstance(v, str):
            return [v]
        if v is None:
            return []
        return v

    @field_validator("fallback", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    def to_declarations(self, root: Any) -> ManifestDeclarations:
        return ManifestDeclarations(
            root=root,
            cache=self.cache,
            network=self.network,
            fallback=self.fallback,
            settings=self.settings,
        )
