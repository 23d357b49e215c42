"""Main GraphQL schema for the roulette service.

Usage:
    from food_roulette.graphql.schema import create_schema
    schema = create_schema()
"""

import strawberry

from food_roulette import __version__
from food_roulette.graphql.resolvers.mutations import HistoryMutations, RouletteMutations
from food_roulette.graphql.resolvers.queries import HistoryQueries, RouletteQueries


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field
    def version(self) -> str:
        return __version__

    @strawberry.field(description="Wheel items and session state")
    def roulette(self) -> RouletteQueries:
        """Roulette queries.

        Example:
            query {
              roulette {
                items { id name color }
                session { gameState selectedMeal winner { name } }
              }
            }
        """
        return RouletteQueries()

    @strawberry.field(description="Daily meal history")
    def history(self) -> HistoryQueries:
        return HistoryQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Item, meal selection, spin and suggestion mutations")
    def roulette(self) -> RouletteMutations:
        return RouletteMutations()

    @strawberry.field(description="History delete and import mutations")
    def history(self) -> HistoryMutations:
        return HistoryMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
