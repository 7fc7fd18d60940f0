"""Cookbook HTTP demo.

Serves the stub person list plus health and Prometheus metrics.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI
from fastapi.responses import Response

from cookbook import __version__
from cookbook.config import settings
from cookbook.logging_config import setup_logging
from cookbook.metrics import get_metrics
from cookbook.repository import PersonRepository, get_person_repository
from cookbook.schemas import Person

# Configure logging at module load
setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cookbook",
    version=__version__,
)


@app.get("/health")
def health():
    """Basic health check."""
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/metrics")
def metrics():
    """Prometheus metrics endpoint."""
    body, content_type = get_metrics()
    return Response(content=body, media_type=content_type)


@app.get("/api/persons", response_model=list[Person])
def list_persons(repository: PersonRepository = Depends(get_person_repository)):
    """Return every known person."""
    persons = repository.find_all()
    logger.debug(f"Returning {len(persons)} persons")
    return persons


# --- Entry point ---

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cookbook.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )
