"""
CodeNote FastAPI Application

A REST API for note title and summary derivation. Clients send raw note
content and receive the derived strings back; notes are stored by the
client, not by this service.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from codenote import __version__
from codenote.config import Config
from codenote.core.factory import LLMFactory
from codenote.models import DerivationResult
from codenote.services.generator import TitleSummaryGenerator
from codenote.utils.logger import get_logger, setup_logging

# Global generator instance
generator: TitleSummaryGenerator | None = None
logger = get_logger(__name__)


class DeriveRequest(BaseModel):
    """Request model for derivation endpoints."""

    content: str = Field(..., description="Raw note content")


class TitleResponse(BaseModel):
    """Response model for title derivation."""

    title: str


class SummaryResponse(BaseModel):
    """Response model for summary derivation."""

    summary: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    generator_initialized: bool
    llm_provider: str
    locale: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global generator

    config = Config.from_env()

    setup_logging(config.logging)

    logger.info("Starting CodeNote server")
    logger.info(
        f"Configuration: LLM={config.llm.provider}/{config.llm.model}, "
        f"locale={config.derivation.locale}, timeout={config.derivation.timeout}s"
    )

    llm = LLMFactory.create(config.llm)
    generator = TitleSummaryGenerator(llm=llm, config=config)
    logger.info("Title/summary generator initialized")

    yield

    logger.info("Shutting down CodeNote server")
    await llm.close()
    generator = None
    logger.info("Cleanup complete")


app = FastAPI(
    title="CodeNote API",
    description="Note title and summary derivation with heuristic fallback",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_generator() -> TitleSummaryGenerator:
    if generator is None:
        raise HTTPException(status_code=503, detail="Generator not initialized")
    return generator


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy" if generator else "initializing",
        generator_initialized=generator is not None,
        llm_provider=type(generator.llm).__name__ if generator and generator.llm else "none",
        locale=generator.config.derivation.locale if generator else "unknown",
    )


@app.post("/derive", response_model=DerivationResult)
async def derive(request: DeriveRequest):
    """
    Derive title and summary for note content.

    The model is tried first; refusals, timeouts and errors fall back to
    heuristic extraction. The response reports which path produced each value.
    """
    return await _require_generator().derive(request.content)


@app.post("/derive/title", response_model=TitleResponse)
async def derive_title(request: DeriveRequest):
    """Derive only the title."""
    return TitleResponse(title=await _require_generator().derive_title(request.content))


@app.post("/derive/summary", response_model=SummaryResponse)
async def derive_summary(request: DeriveRequest):
    """Derive only the summary. Short content yields an empty summary."""
    return SummaryResponse(summary=await _require_generator().derive_summary(request.content))


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "CodeNote API",
        "version": __version__,
        "description": "Note title and summary derivation with heuristic fallback",
        "docs": "/docs",
        "health": "/health",
    }
