"""Suggestion provider adapters and their factory."""
