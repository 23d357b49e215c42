from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, AsyncIterator, Optional

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from food_roulette.application.roulette.orchestrator import RouletteOrchestrator
from food_roulette.domain.wheel.spin_policy import SpinPolicy
from food_roulette.graphql.context import GraphQLContext, create_context
from food_roulette.graphql.schema import create_schema
from food_roulette.infrastructure.config import (
    get_app_version,
    get_log_level,
    get_openai_api_key,
    get_spin_duration_s,
    get_spin_min_turns,
    get_suggestion_theme,
)
from food_roulette.infrastructure.persistence.factory import create_history_repository
from food_roulette.infrastructure.suggestion.providers.factory import (
    create_suggestion_provider,
    create_suggestion_service,
)

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

APP_VERSION = get_app_version()

schema = create_schema()


def build_orchestrator(provider: Any = None) -> RouletteOrchestrator:
    """Wire the session from environment configuration."""
    return RouletteOrchestrator(
        repository=create_history_repository(),
        suggestion_service=create_suggestion_service(provider),
        spin_policy=SpinPolicy(min_full_turns=get_spin_min_turns()),
        spin_duration_s=get_spin_duration_s(),
        default_theme=get_suggestion_theme(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle: build the session on startup, close clients on shutdown.

    An orchestrator already present on ``app.state`` (tests) is kept as is.
    """
    logger = _logging.getLogger("startup")

    api_key = get_openai_api_key()
    masked_key = None
    if api_key:
        masked_key = api_key[:4] + "..." + api_key[-4:] if len(api_key) > 8 else "***"
    logger.info(
        "startup.config",
        extra={"openai_key_present": bool(api_key), "openai_key_masked": masked_key},
    )

    async with AsyncExitStack() as stack:
        if getattr(app.state, "orchestrator", None) is None:
            provider = create_suggestion_provider()
            if provider is not None:
                provider = await stack.enter_async_context(provider)  # type: ignore[arg-type]
            app.state.orchestrator = build_orchestrator(provider)
            logger.info(
                "lifespan.session_ready",
                extra={"suggestion_provider": type(provider).__name__},
            )

        logger.info("lifespan.ready", extra={"status": "serving"})
        yield
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})


async def get_graphql_context(request: Request) -> GraphQLContext:
    return create_context(orchestrator=request.app.state.orchestrator, request=request)


def create_app(orchestrator: Optional[RouletteOrchestrator] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        orchestrator: Preconfigured session; built from env in lifespan when None
    """
    application = FastAPI(
        title="Food Roulette",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    application.state.orchestrator = orchestrator

    @application.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @application.get("/version")
    async def version() -> dict[str, str]:
        return {"version": APP_VERSION}

    graphql_app: GraphQLRouter[Any, Any] = GraphQLRouter(
        schema, context_getter=get_graphql_context
    )
    application.include_router(graphql_app, prefix="/graphql")
    return application


app = create_app()
