"""Navigation response schemas."""

from pydantic import BaseModel


class MenuItem(BaseModel):
    path: str
    title: str
