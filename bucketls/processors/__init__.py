"""Listing processors."""

from .listing_filter import filter_records, matches

__all__ = ["filter_records", "matches"]
