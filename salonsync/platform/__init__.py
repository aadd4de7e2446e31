"""Booking platform API client package."""

from .client import PlatformClient, PlatformCredentials
from .normalize import extract_records

__all__ = ["PlatformClient", "PlatformCredentials", "extract_records"]
