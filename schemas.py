"""
Pydantic schemas for the task API.
"""
from typing import Optional
from pydantic import BaseModel, Field


class Task(BaseModel):
    """A task as stored and returned by the API"""
    id: str = Field(..., description="Task ID")
    text: str = Field(..., description="Task label")
    details: str = Field("", description="Optional details")
    status: str = Field("todo", description="Free-form workflow status")


class TaskCreate(BaseModel):
    """Schema for creating a task. `text` is checked by the endpoint so a
    missing value is reported as a 400 rather than a schema error."""
    text: Optional[str] = Field(None, description="Task label")
    details: Optional[str] = Field(None, description="Optional details")
    status: Optional[str] = Field(None, description="Workflow status, defaults to 'todo'")


class TaskUpdate(BaseModel):
    """Schema for updating a task; only the fields sent are applied"""
    status: Optional[str] = Field(None, description="Workflow status")
    text: Optional[str] = Field(None, description="Task label")
    details: Optional[str] = Field(None, description="Task details")


class Message(BaseModel):
    message: str
