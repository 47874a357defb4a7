import contextlib
import logging
from typing import AsyncIterator

from databases import Database
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from app import config
from app.logs import setup_logging
from domain.aopenai import openai_client_factory
from domain.llm_service import LLMService
from domain.models import GenerationRequest
from domain.repository import RecipesRepository
from domain.services import Generator, Repository, generate_recipe


logger = logging.getLogger(__name__)


INVALID_BODY_MESSAGE = "Invalid request body"


async def generate(request: Request) -> JSONResponse:
    try:
        body = await request.json()
        generation_request = GenerationRequest.model_validate(body)
    except (ValueError, ValidationError) as e:
        logger.warning("Rejected request body: %s", e)
        return JSONResponse(
            {"success": False, "error": INVALID_BODY_MESSAGE}, status_code=400
        )

    outcome = await generate_recipe(
        generation_request,
        llm=request.app.state.llm,
        repository=request.app.state.repo,
    )
    return JSONResponse(outcome.to_dict(), status_code=outcome.status_code)


def create_app(
    *,
    cfg: config.Config | None = None,
    llm: Generator | None = None,
    repo: Repository | None = None,
) -> Starlette:
    """Build the app.

    Collaborators that are not passed in are built from `cfg` at startup and
    closed at shutdown. Injected ones are left to the caller.
    """
    cfg = config.Config() if cfg is None else cfg

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        setup_logging(cfg.log_level)
        db: Database | None = None
        owned_llm: LLMService | None = None
        if app.state.llm is None:
            owned_llm = LLMService(
                openai_client_factory(cfg.openai_api_key),
                model=cfg.core_model,
                temperature=cfg.temperature,
            )
            app.state.llm = owned_llm
        if app.state.repo is None:
            db = Database(cfg.db_url)
            await db.connect()
            repository = RecipesRepository(db)
            await repository.create_table()
            app.state.repo = repository
        logger.info("Serving recipes with %s (%s)", cfg.core_model, cfg.env.value)
        try:
            yield
        finally:
            if owned_llm is not None:
                await owned_llm.close()
            if db is not None:
                await db.disconnect()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/recipes/generate", generate, methods=["POST"]),
        ],
        lifespan=lifespan,
    )
    app.state.llm = llm
    app.state.repo = repo
    return app


app = create_app()
