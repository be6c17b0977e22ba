from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from app.api.records import router as records_router
from app.api.goals import router as goals_router
from app.api.progress import router as progress_router
from app.api.charts import router as charts_router
from app.charts import WeeklyChart
from app.db import Base, engine
from app.models.kv_entry import KeyValueEntry  # noqa: F401  (import ensures table is registered)
from app.core.config import settings
from app.core.logger import setup_logger


setup_logger(level=settings.log_level, log_file=settings.log_file)

app = FastAPI()

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create the key-value table on startup
Base.metadata.create_all(bind=engine)

# One chart per app; each render replaces the previous figure
app.state.weekly_chart = WeeklyChart(title=settings.chart_title)

app.include_router(records_router)
app.include_router(goals_router)
app.include_router(progress_router)
app.include_router(charts_router)

logger.info(f"Study time backend ready (database: {settings.database_url})")


@app.get("/")
def root():
    return {"message": "Study time backend is running"}
