"""ossready - audit a repository for open-source readiness."""

__version__ = "0.3.0"
