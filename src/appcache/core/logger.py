import logging
import sys
import contextvars
from typing import Any, Optional

# Context variable to carry the root of the config currently being declared
_ROOT: contextvars.ContextVar[str] = contextvars.ContextVar("manifest_root", default="-")


class _RootFilter(logging.Filter):
    """Logging filter that injects the manifest root from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.manifest_root = _ROOT.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | root=%(manifest_root)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and appcache-specific logger.

    Root logger stays at INFO to suppress library noise.
    Only the appcache namespace is set to the requested level.

    Args:
        level: Log level for appcache logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()
    appcache_logger = logging.getLogger("appcache")

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _RootFilter) for f in h.filters):
            # Already configured; just update appcache logger level
            appcache_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_RootFilter())
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    appcache_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "appcache") -> logging.Logger:
    """Return a module-specific logger under the ``appcache`` namespace.

    Handlers are installed lazily by :func:`configure_root_logger`; library code
    only asks for loggers so embedding applications keep control of output.
    """
    if name != "appcache" and not name.startswith("appcache."):
        name = f"appcache.{name}"
    return logging.getLogger(name)


def push_root(root: Any) -> Optional[contextvars.Token]:
    """Set the manifest root in context and return a token for later reset."""
    if root is None:
        return None
    return _ROOT.set(str(root))


def reset_root(token: Optional[contextvars.Token]) -> None:
    """Reset the manifest root context using the provided token (if any)."""
    if token is None:
        return
    try:
        _ROOT.reset(token)
    except ValueError:
        # Token created in a different context; leave the current value alone
        pass
