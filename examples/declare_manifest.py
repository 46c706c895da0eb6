"""
Example: declaring offline manifest contents in code and in a file.

A manifest writer only needs the accumulated declarations; how they were
declared (a Python block, a YAML file, or both) doesn't matter to it.
"""

from pathlib import Path

from appcache import OfflineConfig, declarations_block, load_config
from appcache.core.logger import configure_root_logger

configure_root_logger("DEBUG")


# =============================================================================
# Example 1: Declaration block
# =============================================================================
def declare(m):
    m.cache("index.html", "css/style.css")
    m.network("/api")
    m.fallback({"/": "/offline.html"})
    m.settings("prefer-online")


config = OfflineConfig("/app", declare)
print(config.snapshot().model_dump())


# =============================================================================
# Example 2: Method chaining, no block
# =============================================================================
chained = OfflineConfig("/app").cache("index.html").network("*")
print(chained.cache_entries, chained.network_entries)


# =============================================================================
# Example 3: Declarations from a YAML file
# =============================================================================
from_file = load_config(Path(__file__).parent / "manifest.yaml")
print(from_file.fallback_entries)


# =============================================================================
# Example 4: File declarations extended in code
# =============================================================================
shared = declarations_block({"cache": ["vendor.js"]})
combined = OfflineConfig("/app", lambda m: (shared(m), m.cache("app.js")))
print(combined.cache_entries)
