from fastapi import Request
from fastapi.responses import JSONResponse


class TranscriptFetchError(Exception):
    """Raised when the transcript provider fails for any reason."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def transcript_fetch_error_handler(request: Request, exc: TranscriptFetchError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "statusCode": exc.status_code,
            "statusMessage": exc.message,
            "message": exc.message,
        }
    )
