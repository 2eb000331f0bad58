"""Data exchange orchestration service for dataspace connectors."""

__version__ = "0.1.0"

__all__ = ["__version__"]
