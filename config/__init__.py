"""Environment configuration and provider settings."""
