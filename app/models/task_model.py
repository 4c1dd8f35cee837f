from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from app.core.database import Base

TASK_STATUSES   = ("pending", "in-progress", "completed")
TASK_PRIORITIES = ("low", "medium", "high")

class Task(Base):
    __tablename__ = "tasks"

    id          = Column(Integer, primary_key=True, index=True)
    user_id     = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title       = Column(String, nullable=False)
    description = Column(Text, nullable=True, default="")
    status      = Column(String, nullable=False, default="pending")
    priority    = Column(String, nullable=False, default="medium")
    created_at  = Column(DateTime, nullable=False, server_default=func.now())
    updated_at  = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_tasks_user_id', 'user_id'),
        Index('idx_tasks_status', 'status'),
        {"sqlite_autoincrement": True},
    )
    owner       = relationship("User", back_populates="tasks")
