from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from analytics import router as analytics_router
from athletes import router as athletes_router
from core import config, db, errors
from core.logging import configure_logging
from games import router as games_router
from players import router as players_router
from scores import router as scores_router

load_dotenv()
configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Athletes & Scores API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_exception_handlers(app)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


app.include_router(athletes_router.router, tags=["athletes"])
app.include_router(players_router.router, tags=["players"])
app.include_router(games_router.router, tags=["games"])
app.include_router(scores_router.router, tags=["scores"])
app.include_router(analytics_router.router, tags=["analytics"])
