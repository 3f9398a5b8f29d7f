"""Caches, pagination, extraction and the search orchestrator."""
