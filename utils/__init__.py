"""Logging and page rendering helpers."""
