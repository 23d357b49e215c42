"""Domain layer: pure wheel math, history store, roulette state and ports."""
