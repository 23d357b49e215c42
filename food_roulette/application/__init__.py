"""Application layer: orchestrates domain logic for one roulette session."""
