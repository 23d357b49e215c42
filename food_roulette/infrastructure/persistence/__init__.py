"""Persistence adapters: key/value storages and the history repository."""
