"""AI adapters."""
