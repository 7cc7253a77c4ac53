"""embedfix - Reply to Twitter/X status links with embed-friendly mirror links."""

try:
    from importlib.metadata import version

    __version__ = version("embedfix")
except Exception:
    __version__ = "0.0.0-dev"
