from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_current_user_id
from app.schemas import setting_schema, task_schema
from app.services import task_service

# Todas as rotas exigem autenticação
router = APIRouter(
    prefix="/api/tasks",
    tags=["Tarefas"],
)


@router.get("", response_model=List[task_schema.TaskOut])
def listar_tasks(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return task_service.listar_tasks(db, user_id)

@router.get("/{task_id}", response_model=task_schema.TaskOut)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return task_service.get_task(db, user_id, task_id)

@router.post("", response_model=task_schema.TaskOut, status_code=status.HTTP_201_CREATED)
def criar_task(
    task_in: task_schema.TaskCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return task_service.criar_task(db, user_id, task_in)

@router.put("/{task_id}", response_model=task_schema.TaskOut)
def update_task(
    task_id: int,
    task_in: task_schema.TaskUpdate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return task_service.update_task(db, user_id, task_id, task_in)

@router.delete("/{task_id}", response_model=setting_schema.MessageResponse)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    task_service.delete_task(db, user_id, task_id)
    return {"message": "Task deleted successfully"}
