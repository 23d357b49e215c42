"""Food roulette: spin a wheel of dishes and keep a daily meal history."""

__version__ = "0.1.0"
