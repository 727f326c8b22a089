from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from spec_assistant.ai.chat.router import router as chat_router
from spec_assistant.ai.chat.schemas import ChatErrorResponse
from spec_assistant.config import get_app_settings, get_client_base_url
from spec_assistant.utils.logger import logger

STATIC_DIR = Path(__file__).parent / "static"


def get_version() -> str:
    """Get the installed package version."""
    try:
        return version("spec-assistant")
    except PackageNotFoundError:
        return "0.0.0"


app = FastAPI(
    title="Spec Assistant API",
    description="Construction specification chat assistant",
    version=get_version(),
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_client_base_url()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as client errors in the chat error format."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning("Invalid request body", path=request.url.path, details=details)
    return JSONResponse(
        status_code=400,
        content=ChatErrorResponse(error=f"不正なリクエストです: {details}").model_dump(),
    )


@app.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the chat page."""
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@app.get("/healthcheck")
async def healthcheck():
    """Health check endpoint."""
    return {
        "status": "ok",
        "message": "Spec Assistant API is running",
        "environment": get_app_settings().environment.value,
    }
