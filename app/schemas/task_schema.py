from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

TaskStatus = Literal["pending", "in-progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]


class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None

    @field_validator("title", "priority", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

class TaskUpdate(BaseModel):
    title:       Optional[str]          = None
    # description vazia é uma atualização válida
    description: Optional[str]          = None
    status:      Optional[TaskStatus]   = None
    priority:    Optional[TaskPriority] = None

    @field_validator("title", "status", "priority", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

class TaskOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    status: str
    priority: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
