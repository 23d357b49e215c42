"""Roulette session: food items, game state and the state reducer."""
