"""
Response schemas shared by every collection router.
"""
from pydantic import BaseModel

class MessageResponse(BaseModel):
    """Acknowledgement returned by update and delete endpoints"""
    message: str

class CreatedResponse(MessageResponse):
    """Acknowledgement returned by create endpoints, carrying the new record ID"""
    id: int
