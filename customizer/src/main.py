import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from customizer.src.config import get_settings
from customizer.src.routes import health_router, pipeline_router, parameters_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Pipeline Customizer API")
    yield
    logger.info("Shutting down Pipeline Customizer API")

app = FastAPI(
    title="Pipeline Customizer",
    description="Build an azure-pipelines.yml from a project config and parameter list",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(pipeline_router, prefix="/api")
app.include_router(parameters_router, prefix="/api")

@app.get("/")
async def root():
    return {
        "name": "Pipeline Customizer",
        "version": "0.1.0",
        "docs": "/docs"
    }

def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)

if __name__ == "__main__":
    run()
