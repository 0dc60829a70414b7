import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import state
from api.routers import keywords, models, ops, prompts, settings
from llm.errors import GenerationError
from storage.config_store import ApiConfigStore

# Logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

ALLOWED_HEADERS = ["Content-Type", "Authorization", "X-Provider", "X-API-Key", "X-Model"]

app = FastAPI(title="Keyword & Prompt Generator")


# Registered before CORSMiddleware so it runs inside it: unexpected
# failures still leave with CORS headers and a {message} body.
@app.middleware("http")
async def unexpected_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error")
        return JSONResponse(status_code=500, content={"message": str(e) or "Internal server error"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=ALLOWED_HEADERS,
)

app.include_router(keywords.router)
app.include_router(prompts.router)
app.include_router(models.router)
app.include_router(settings.router)
app.include_router(ops.router)


@app.on_event("startup")
async def startup() -> None:
    state.config_store = ApiConfigStore()
    state.api_config = state.config_store.load()
    logger.info(f"Loaded settings (provider: {state.api_config.selected_provider})")


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request parameters: {field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request parameters"
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )

