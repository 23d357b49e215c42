from food_roulette.graphql.resolvers.mutations import HistoryMutations, RouletteMutations
from food_roulette.graphql.resolvers.queries import HistoryQueries, RouletteQueries

__all__ = ["HistoryMutations", "HistoryQueries", "RouletteMutations", "RouletteQueries"]
