from typing import Optional

from pydantic import BaseModel


class Config(BaseModel):
    base_url: str
    secret: Optional[str] = None
    secure: bool = False
