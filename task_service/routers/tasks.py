from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from ..core.auth import get_current_user, CurrentUser
from ..core.dependencies import get_task_service
from ..services.tasks import TaskService
from ..services.validation import validate_task_status
from ..schemas.task import TaskCreate, TaskStatusUpdate, TaskResponse, TaskFilter

router = APIRouter()


@router.get("/", response_model=List[TaskResponse])
def get_tasks(
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
    search: Optional[str] = Query(None, min_length=1, max_length=100, description="Search in title and description"),
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service)
):
    """Get the authenticated user's tasks, optionally filtered"""
    filters = TaskFilter(
        status=validate_task_status(status_filter) if status_filter is not None else None,
        search=search
    )
    return service.list_tasks(filters, current_user)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service)
):
    """Get a specific task by ID"""
    return service.get_task(task_id, current_user)


@router.post("/", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service)
):
    """Create a new task for the authenticated user"""
    return service.create_task(task_data, current_user)


@router.patch("/{task_id}/status", response_model=TaskResponse)
def update_task_status(
    task_id: int,
    status_update: TaskStatusUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service)
):
    """Change a task's status (case-insensitive OPEN, IN_PROGRESS, DONE)"""
    new_status = validate_task_status(status_update.status)
    return service.update_task_status(task_id, new_status, current_user)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service)
):
    """Delete a task"""
    service.delete_task(task_id, current_user)
