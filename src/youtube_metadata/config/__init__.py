"""
Configuration management module for youtube-metadata.

Handles settings for the page-fetching client. The parsers themselves take
no configuration.
"""

from __future__ import annotations

from youtube_metadata.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
