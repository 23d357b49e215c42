"""GraphQL context factory for dependency injection.

Resolvers reach the session through ``info.context.get("orchestrator")``.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from food_roulette.application.roulette.orchestrator import RouletteOrchestrator


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Attributes:
        orchestrator: The local roulette session
        request: FastAPI request object (None outside HTTP, e.g. in tests)
    """

    def __init__(
        self,
        orchestrator: RouletteOrchestrator,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.orchestrator = orchestrator
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name, None when missing."""
        return getattr(self, key, None)


def create_context(
    orchestrator: RouletteOrchestrator,
    request: Optional[Request] = None,
) -> GraphQLContext:
    return GraphQLContext(orchestrator=orchestrator, request=request)
