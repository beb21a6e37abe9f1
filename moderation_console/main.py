"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moderation_console.core.config import settings
from moderation_console.core.database import init_models
from moderation_console.core.logging import setup_logging
from moderation_console.core.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from moderation_console.modules.audit.router import router as audit_router
from moderation_console.modules.comment.router import router as comment_router
from moderation_console.modules.note.router import router as note_router
from moderation_console.modules.oauth.router import router as oauth_router
from moderation_console.modules.video.router import router as video_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
## YouTube Video Moderation Console

Manage a single YouTube video: read and edit its metadata, list, post and
delete comments, keep notes, and review the audit trail of every action.

Mutating endpoints use the OAuth access token configured in
`YOUTUBE_ACCESS_TOKEN`; use `/api/auth` to obtain one.
    """,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "health", "description": "Health check endpoints"},
        {"name": "video", "description": "Video metadata - fetch and update"},
        {"name": "comments", "description": "Comment listing, posting and deletion"},
        {"name": "notes", "description": "Free-form notes about the video"},
        {"name": "audit", "description": "Audit trail of actions taken"},
        {"name": "oauth", "description": "OAuth consent flow for the access token"},
    ],
)

setup_logging(
    level="INFO" if not settings.DEBUG else "DEBUG",
    json_format=not settings.DEBUG,
    include_stack_trace=True,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(video_router, prefix=settings.API_PREFIX)
app.include_router(comment_router, prefix=settings.API_PREFIX)
app.include_router(note_router, prefix=settings.API_PREFIX)
app.include_router(audit_router, prefix=settings.API_PREFIX)
app.include_router(oauth_router, prefix=settings.API_PREFIX)
