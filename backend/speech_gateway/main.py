from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from speech_gateway.api.middleware import BodySizeLimitMiddleware
from speech_gateway.api.routes import router
from speech_gateway.core.errors import GatewayError, InvalidInput
from speech_gateway.core.logging import logger, setup_logging
from speech_gateway.core.settings import settings
from speech_gateway.infra.providers.polly import init_provider

setup_logging()

STATIC_DIR = Path(settings.static_dir) if settings.static_dir else Path(__file__).parent / "static"

app = FastAPI(
    title="Speech Gateway",
    version="1.0.0",
    description="Text in, Amazon Polly speech out (Matthew, en-US, neural)",
)

# Last added runs outermost: CORS wraps the body limit.
app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


# ---------------------------------------------------------------------------
# Errors -> {"error": message}
# ---------------------------------------------------------------------------

@app.exception_handler(GatewayError)
async def _gateway_error(request: Request, exc: GatewayError):
    if isinstance(exc, InvalidInput):
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def _bad_body(request: Request, exc: RequestValidationError):
    logger.warning("%s %s malformed body: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "request body must be a JSON object"})


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.on_event("startup")
async def _init_polly():
    init_provider()


# Mounted last so the API routes above take precedence.
app.mount("/", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")
