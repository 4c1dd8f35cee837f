from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.core.exceptions import NotFound, ValidationError
from app.models import task_model
from app.schemas import task_schema


def owned_tasks(db: Session, user_id: int) -> Query:
    """Ponto único de checagem de dono: toda operação parte desta query."""
    return db.query(task_model.Task).filter(task_model.Task.user_id == user_id)


def listar_tasks(db: Session, user_id: int) -> List[task_model.Task]:
    return owned_tasks(db, user_id).order_by(
        task_model.Task.created_at.desc(),
        task_model.Task.id.desc()
    ).all()


def get_task(db: Session, user_id: int, task_id: int) -> task_model.Task:
    task = owned_tasks(db, user_id).filter(task_model.Task.id == task_id).first()
    if not task:
        raise NotFound("Task not found")
    return task


def criar_task(db: Session, user_id: int, task_in: task_schema.TaskCreate) -> task_model.Task:
    if not task_in.title:
        raise ValidationError("Title is required")
    db_task = task_model.Task(
        user_id=user_id,
        title=task_in.title,
        description=task_in.description or "",
        priority=task_in.priority or "medium",
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    return db_task


def update_task(
    db: Session,
    user_id: int,
    task_id: int,
    task_in: task_schema.TaskUpdate
) -> task_model.Task:
    db_task = get_task(db, user_id, task_id)

    # campos omitidos mantêm o valor atual
    if task_in.title:
        db_task.title = task_in.title
    if task_in.description is not None:
        db_task.description = task_in.description
    if task_in.status:
        db_task.status = task_in.status
    if task_in.priority:
        db_task.priority = task_in.priority

    # toca updated_at mesmo quando nada mudou
    db_task.updated_at = func.now()
    db.commit()
    db.refresh(db_task)
    return db_task


def delete_task(db: Session, user_id: int, task_id: int) -> None:
    deleted = owned_tasks(db, user_id).filter(
        task_model.Task.id == task_id
    ).delete(synchronize_session=False)
    if not deleted:
        raise NotFound("Task not found")
    db.commit()
