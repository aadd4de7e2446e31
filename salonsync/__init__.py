"""salonsync - platform sync and reconciliation engine for salon branches."""

__version__ = "0.1.0"
