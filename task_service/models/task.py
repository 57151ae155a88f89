import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.sql import func
from ..core.database import Base


class TaskStatus(str, enum.Enum):
    """Task status enumeration"""
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(Base):
    """Task model for database"""
    __tablename__ = "tasks"
    # Deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")

    status = Column(
        Enum(TaskStatus, name="task_status", native_enum=False, length=20),
        default=TaskStatus.OPEN,
        nullable=False,
        index=True
    )

    # Owner, bound at creation
    user_id = Column(Integer, nullable=False, index=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True
    )

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status='{self.status}')>"
