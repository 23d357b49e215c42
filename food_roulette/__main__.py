"""Run the local roulette service: ``python -m food_roulette``."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "food_roulette.app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
