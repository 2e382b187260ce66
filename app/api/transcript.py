import logging

from fastapi import APIRouter, Depends, Path

from app.core.errors import TranscriptFetchError
from app.schemas.error import ErrorResponse
from app.services.transcript_service import TranscriptService, get_transcript_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcript", tags=["Transcript"])

@router.get(
    "/{videoId}",
    responses={500: {"model": ErrorResponse}},
)
def get_transcript(
    videoId: str = Path(..., description="The ID of the YouTube video"),
    transcript_service: TranscriptService = Depends(get_transcript_service)
):
    try:
        return transcript_service.get_transcript(videoId)

    except Exception as e:
        logger.error(f"error {e}")
        raise TranscriptFetchError(str(e))
