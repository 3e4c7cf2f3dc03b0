# app/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import PARSE_FAILURE_MESSAGE
from app.db.redis import r
from app.routers.results import router as results_router
import logging, sys

API_DESCRIPTION = (
    "PCSO draw results scraped from the public results page. "
    "Response keys are snake_case: `game_id` replaces the older `gameId` key."
)

app = FastAPI(
    title=settings.APP_NAME,
    description=API_DESCRIPTION,
    version=getattr(settings, "APP_VERSION", "0.1.0"),
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logging.getLogger("uvicorn").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger("app")

app.include_router(results_router)

@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": PARSE_FAILURE_MESSAGE})

@app.on_event("shutdown")
async def on_shutdown() -> None:
    await r.aclose()

# 健康检查
@app.get("/ping")
async def ping():
    return {"ok": True, "env": settings.APP_ENV}

@app.get("/healthz")
async def healthz():
    return {"status": "healthy"}
