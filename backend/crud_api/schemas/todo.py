"""Todo Schemas — Pydantic models for the todos service boundary."""

from pydantic import BaseModel


class Todo(BaseModel):
    """Stored todo — id is a UUID4 token assigned by the store."""
    id: str
    title: str


class TodoCreate(BaseModel):
    title: str


class TodoDeleteResponse(BaseModel):
    message: str
