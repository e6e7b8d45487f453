import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from featuregen import __version__
from featuregen.api.routes import router
from featuregen.config import Settings
from featuregen.llm.client import GeminiClient
from featuregen.pipeline.generator import FeatureGenerator, TextModel
from featuregen.ui.board import FeatureBoard


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[TextModel] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Project Feature Generator",
        version=__version__,
    )

    # Middleware FIRST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes AFTER middleware
    app.include_router(router)

    app.state.board = FeatureBoard()
    app.state.generator = FeatureGenerator(client or GeminiClient(settings))

    return app


app = create_app()
