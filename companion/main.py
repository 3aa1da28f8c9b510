import logging
from fastapi import FastAPI

from companion.auth.router import router as auth_router
from companion.config import get_settings, log_configuration_problems
from companion.content.router import router as content_router
from companion.exercises.router import router as exercises_router
from companion.goals.router import router as goals_router
from companion.ratings.router import router as ratings_router
from companion.reports.router import router as reports_router
from companion.rewards.router import router as rewards_router

settings = get_settings()

logging.basicConfig(level=settings.log_level)
log_configuration_problems(settings)

app = FastAPI(title="AI Integration Companion")

app.include_router(auth_router)
app.include_router(content_router)
app.include_router(ratings_router)
app.include_router(rewards_router)
app.include_router(goals_router)
app.include_router(exercises_router)
app.include_router(reports_router)


@app.get("/health")
def health():
    return {"status": "ok"}
