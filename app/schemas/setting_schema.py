from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


def stringify_value(value):
    # Valores são sempre gravados como texto ("true"/"false" para booleanos)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class SettingCreate(BaseModel):
    key: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def value_as_text(cls, value):
        return stringify_value(value)

class SettingUpdate(BaseModel):
    value: Optional[str] = None
    description: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def value_as_text(cls, value):
        return stringify_value(value)

class SettingOut(BaseModel):
    id: int
    key: str
    value: str
    description: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
