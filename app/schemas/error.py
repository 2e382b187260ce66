from pydantic import BaseModel

class ErrorResponse(BaseModel):
    statusCode: int
    statusMessage: str
    message: str
