from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel

class ClientName(CamelModel):
    first_name: str
    last_name: str

class Client(ClientName):
    id: str
    email: str
    phone: Optional[str] = None
    nationality: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
