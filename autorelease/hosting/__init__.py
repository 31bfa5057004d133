"""Hosting platform (GitHub) API access."""
