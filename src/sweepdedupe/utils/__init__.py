"""Common utility functions for sweepdedupe."""

from sweepdedupe.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
