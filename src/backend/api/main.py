"""Entry point for the receipt points service.

`create_app` wires the rules engine, the points store and the exception
handlers into a FastAPI app; `python -m api.main` serves it with uvicorn
using the settings from `api.config`.
"""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from common.rules_engine import InvalidReceiptError, RulesRunner, ScoringConfig, load_scoring_config, registry
from stores import InMemoryPointsStore, PointsStore

from api.config import AppConfig, get_app_config
from api.error_handlers import invalid_receipt_handler, validation_exception_handler
from api.receipts import router as receipts_router


logger = logging.getLogger(__name__)


def create_app(
    *,
    store: Optional[PointsStore] = None,
    scoring_config: Optional[ScoringConfig] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    config = config or get_app_config()
    if scoring_config is None:
        if config.scoring_config_path:
            logger.info("Loading scoring config from %s", config.scoring_config_path)
            scoring_config = load_scoring_config(config.scoring_config_path)
        else:
            scoring_config = ScoringConfig()

    app = FastAPI(
        title="Receipt Processor",
        description="A simple receipt processor",
        version="1.0.0",
        docs_url="/api-docs",
    )
    app.state.points_store = store if store is not None else InMemoryPointsStore()
    # A bad rule entry stops startup instead of failing every submission.
    app.state.scoring_config = registry.validate_config(scoring_config)
    app.state.rules_runner = RulesRunner()

    app.add_exception_handler(InvalidReceiptError, invalid_receipt_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(receipts_router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


def main() -> None:
    config = get_app_config()
    logging.basicConfig(level=config.log_level)
    logger.info("Starting receipt processor on %s:%d", config.host, config.port)
    uvicorn.run(create_app(config=config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
