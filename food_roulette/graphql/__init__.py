"""GraphQL surface over the roulette session."""
