from pydantic import BaseModel, ConfigDict
from typing import Optional


class QuoteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author: str
    text: str
    length: int


class QuoteCreate(BaseModel):
    # Both fields are required for creation; they stay optional here so the
    # handler can answer a missing field with 400 instead of a schema error.
    author: Optional[str] = None
    text: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.author) and bool(self.text)


class QuoteUpdate(BaseModel):
    author: Optional[str] = None
    text: Optional[str] = None
