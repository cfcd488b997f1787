import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from db import init_db

# Routers
from routers.concepts import router as concepts_router
from routers.health import router as health_router
from routers.problems import router as problems_router
from routers.progress import router as progress_router
from routers.store import router as store_router

logger = logging.getLogger("vector-tutor")
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    if config.DEBUG_ZERO_BYPASS:
        logger.warning("debug answer bypass is ON: the answer \"0\" is accepted for every problem")
    yield


app = FastAPI(title="2D Vectors – Tutor API", lifespan=lifespan)

# Allow calls from the local front-end dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-session-id"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(concepts_router)  # /concepts
app.include_router(problems_router)  # /problems, /problems/current, /problems/check
app.include_router(progress_router)  # /progress, /progress/reset
app.include_router(store_router)  # /store, /store/purchase
app.include_router(health_router)  # /health/...
