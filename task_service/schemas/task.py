"""
Pydantic schemas for Task Service.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from ..models.task import TaskStatus


class TaskBase(BaseModel):
    """Base task schema"""
    title: str = Field(..., min_length=1, max_length=200, description="Task title")
    description: str = Field("", max_length=1000, description="Task description")


class TaskCreate(TaskBase):
    """Schema for creating a task"""
    pass


class TaskStatusUpdate(BaseModel):
    """Schema for changing a task's status; validated by validate_task_status"""
    status: str = Field(..., description="New status (case-insensitive)")


class TaskResponse(TaskBase):
    """Schema for task response"""
    id: int = Field(..., description="Task ID")
    status: TaskStatus = Field(..., description="Task status")
    user_id: int = Field(..., description="User ID who owns the task")
    created_at: Optional[datetime] = Field(None, description="Task creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Task update timestamp")

    class Config:
        from_attributes = True


class TaskFilter(BaseModel):
    """Optional list filters, combined with AND"""
    status: Optional[TaskStatus] = Field(None, description="Exact status match")
    search: Optional[str] = Field(None, description="Case-insensitive substring of title or description")

    class Config:
        frozen = True
