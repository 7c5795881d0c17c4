from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import time

import discovery.core.startup as startup
from discovery.core.config import CORS_ORIGINS, LOG_LEVEL
from discovery.api.discover import router as discover_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The catalog is small and already parsed: load it before serving
    logger.info("[LIFESPAN] Loading content catalog...")
    startup.load_catalog()
    yield


app = FastAPI(
    title="Content Discovery",
    version="1.0.0",
    lifespan=lifespan
)

# ===== MIDDLEWARE =====
@app.middleware("http")
async def log_requests(request, call_next):
    start_time = time.time()
    path = request.url.path
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(f"[REQUEST] {request.method} {path} | Status: {response.status_code} | {duration:.3f}s")
    return response

# ===== CORS =====
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===== ROUTER =====
app.include_router(discover_router, prefix="/api")

# ===== HEALTH CHECK =====
@app.get("/health")
def health():
    """Basic health check for load balancers."""
    return {"status": "ok"}


@app.get("/")
def root():
    is_ready = startup.LOADING_ERROR is None and bool(startup.POSTS or startup.PROJECTS)
    return {
        "service": "Content Discovery",
        "status": "ready" if is_ready else "empty",
        "ready": is_ready,
        "posts": len(startup.POSTS),
        "projects": len(startup.PROJECTS),
        "error": startup.LOADING_ERROR,
    }
