"""pyskim - top-level metadata extraction for Python source without parsing it."""

try:
    from importlib.metadata import version

    __version__ = version("pyskim")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
