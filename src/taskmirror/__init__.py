"""taskmirror - a caching task repository over a local store and a remote service."""

__version__ = "0.1.0"
