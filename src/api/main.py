"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src to path
# main.py is at /app/src/api/main.py
# src is at /app/src, so we go up 2 levels
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.gql.schema import create_graphql_router
from api.routes import health, home, users
from adapter.dataset.user_dataset import load_users
from adapter.memory.user_repository import InMemoryUserRepository
from utils.logging import setup_structured_logging

SERVICE_NAME = "User Directory API"

setup_structured_logging(os.getenv("LOG_LEVEL", "INFO"), service=SERVICE_NAME)

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

DATASET_PATH = Path(os.getenv("USERS_DATASET_PATH", str(_src_path / "data" / "MOCK_DATA.json")))
GRAPHIQL_ENABLED = os.getenv("GRAPHIQL_ENABLED", "true").lower() in ("1", "true", "yes")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: seed the user store from the dataset."""
    try:
        seed = load_users(DATASET_PATH)
    except FileNotFoundError:
        logger.warning("User dataset not found, starting with an empty store", extra={"path": str(DATASET_PATH)})
        seed = []
    # DatasetError propagates: a malformed dataset must not start the service

    app.state.user_repo = InMemoryUserRepository(seed)
    logger.info("User store ready", extra={"count": app.state.user_repo.count()})

    yield  # App runs here


# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="In-memory user directory with GraphQL and REST search",
    version=VERSION,
    lifespan=lifespan,
)

# Empty until lifespan seeds it; requests made without a lifespan still resolve
app.state.user_repo = InMemoryUserRepository()

# The search page is same-origin; CORS only matters for outside GraphQL clients
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register routes
app.include_router(create_graphql_router(graphiql=GRAPHIQL_ENABLED), prefix="/graphql")
app.include_router(users.router)
app.include_router(health.router)
app.include_router(home.router)


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 5000))
    # Application logs go through structured logging; skip uvicorn's access log
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
