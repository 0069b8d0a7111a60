import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from contacts import router as contacts_router
from core import db, migrate
from core.errors import ApiError, StorageError
from core.observability import setup_logging

load_dotenv(Path.cwd() / ".env")

logger = logging.getLogger(__name__)


def listen_host() -> str:
    return os.environ.get("HOST", "127.0.0.1").strip() or "127.0.0.1"


def listen_port() -> int:
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return 3000
    try:
        return int(raw)
    except ValueError:
        return 3000


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    # Connection or migration failures propagate and abort startup.
    await db.init_pool()
    try:
        await migrate.migrate()
        logger.info("Listening on %s:%s pool_max_size=%s", listen_host(), listen_port(), db.POOL_MAX_SIZE)
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="phonebook-api", lifespan=lifespan)

# Any origin may call any endpoint.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contacts_router.router, tags=["contacts"])


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> PlainTextResponse:
    if isinstance(exc, StorageError):
        logger.warning("storage_error path=%s error=%s", request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    errors = exc.errors()
    detail = str(errors[0].get("msg", "")) if errors else ""
    message = f"Bad Request: {detail}" if detail else "Bad Request"
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=listen_host(), port=listen_port())
