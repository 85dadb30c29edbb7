from pydantic import BaseModel

class ErrorMessage(BaseModel):
    status: str
    message: str
