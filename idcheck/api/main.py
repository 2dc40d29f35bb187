"""
FastAPI Application — idcheck.

Thin HTTP adapter over the validation service:
  - /api/v1/validate/{kind}     document numbers (BR, US, UK, CA, MX, KR, DE)
  - /api/v1/validate/passport   passport number + issuing country
  - /api/v1/validate/fields     user-registration payload
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idcheck import __version__
from idcheck.api.routes.validate import get_service, router as validate_router
from idcheck.api.schemas.responses import HealthResponse
from idcheck.config.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="idcheck",
    description="Identity-document and registration-field validation.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register validation routes
app.include_router(validate_router, prefix="/api/v1", tags=["Validation"])


# ── Health ──
@app.get("/health", response_model=HealthResponse)
async def health():
    service = get_service()
    return HealthResponse(
        status="ok",
        version=__version__,
        document_kinds=len(service.document_kinds),
        passport_countries=len(service.passport_countries),
    )


def main():
    logger.info(f"Starting idcheck API on {settings.api_host}:{settings.api_port} ({settings.env})")
    uvicorn.run(
        "idcheck.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug and settings.env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
