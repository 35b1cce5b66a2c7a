from typing import Optional

from pydantic import BaseModel


class Config(BaseModel):
    base_url: str
    authorization: Optional[str] = None
