from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class PostOut(BaseModel):
    id: str
    user_id: str
    desc: str
    img: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
