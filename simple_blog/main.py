import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simple_blog.perf import performance_middleware
from simple_blog.routes import admin, posts
from simple_blog.settings_loader import load_settings
from simple_blog.store import init_db

settings = load_settings()

logger = logging.getLogger(__name__)
logging.basicConfig()
logging.getLogger("simple_blog").setLevel(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Initialize database
    await init_db()
    logger.info("Database ready")
    yield


app = FastAPI(title="simple_blog", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(performance_middleware)

app.include_router(posts.router)
app.include_router(admin.router)


@app.get("/api/status")
async def status() -> dict:
    return {"status": "up"}
