import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from conceptgraph.config import settings
from conceptgraph.routers.explore import router as explore_router
from conceptgraph.services.concept_store import ConceptDataError

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Concept Graph API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(explore_router)


@app.exception_handler(ConceptDataError)
async def concept_data_error_handler(request: Request, exc: ConceptDataError) -> JSONResponse:
    logger.error("Concept data unavailable for %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Concept data unavailable"})


@app.get("/health")
async def health_check():
    return {"status": "ok"}
