"""Cron expression parsing, UTC time helpers, .env loading, robots.txt handling and JSON values."""

__version__ = "0.1.0"