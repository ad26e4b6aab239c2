"""Typed clients for Azure resource-manager services."""

__version__ = "0.1.0"
