from contextlib import asynccontextmanager
from fastapi import FastAPI
import uvicorn
import logging
import os

from database import init_db
from route_modules import combined_router
from service_modules.exercise_service import exercise_service
from service_modules.routine_service import routine_service

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger("fitness_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    exercise_service.seed_default_exercises()
    routine_service.seed_templates()
    logger.info("Database ready")
    yield


app = FastAPI(title="Fitness App API", lifespan=lifespan)
app.include_router(combined_router)


@app.middleware("http")
async def add_no_cache_header(request, call_next):
    response = await call_next(request)
    if request.url.path.startswith("/api/"):
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate, max-age=0, private"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
    return response


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 9007))
    uvicorn.run(app, host="0.0.0.0", port=port)
