"""Task CRUD routes scoped by username in the path."""

from fastapi import APIRouter, Depends

from taskdesk.app.deps import get_task_repository
from taskdesk.app.schemas import OkResponse, Task, TaskCreate, TaskUpdate
from taskdesk.app.services.identity import require_valid_username

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/{username}", response_model=list[Task], response_model_exclude_unset=True)
def list_tasks(username: str, repo=Depends(get_task_repository)):
    return repo.list_tasks(require_valid_username(username))


@router.post("/{username}", response_model=Task, response_model_exclude_unset=True)
def add_task(username: str, payload: TaskCreate, repo=Depends(get_task_repository)):
    return repo.add_task(username, payload.to_fields())


@router.put("/{username}/{task_id}", response_model=Task, response_model_exclude_unset=True)
def update_task(username: str, task_id: str, payload: TaskUpdate, repo=Depends(get_task_repository)):
    return repo.update_task(username, task_id, payload.to_patch())


@router.delete("/{username}/{task_id}", response_model=OkResponse)
def delete_task(username: str, task_id: str, repo=Depends(get_task_repository)):
    repo.delete_task(username, task_id)
    return OkResponse()
