"""agent-guides - registry of guideline documents for AI coding agents."""

try:
    from importlib.metadata import version

    __version__ = version("agent-guides")
except Exception:
    __version__ = "0.0.0"  # Fallback for development/testing

__all__ = ["__version__"]
