"""Food suggestions: provider port and the never-failing suggestion service."""
