from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.transcript import router as transcript_router
from app.core.config import get_settings
from app.core.errors import TranscriptFetchError, transcript_fetch_error_handler
from app.core.logging import setup_logging

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(TranscriptFetchError, transcript_fetch_error_handler)

app.include_router(transcript_router, prefix="/api", tags=["Transcript"])

@app.get("/")
def root():
     return {"Message": "Backend is running"}
