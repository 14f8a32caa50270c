from typing import Optional

from fastapi import APIRouter, Body, Depends, Response

from todo_api.database import InMemoryDatabase, get_db
from todo_api.dependencies import get_current_todo, get_current_user
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.schemas.todo import TodoCreate, TodoOut, TodoUpdate
from todo_api.services.todo_service import TodoService

router = APIRouter()
service = TodoService()

@router.get("", response_model=list[TodoOut])
async def list_todos(
    user: User = Depends(get_current_user), db: InMemoryDatabase = Depends(get_db)
):
    return [todo.to_dict() for todo in service.list_todos(db, user)]

@router.post("", response_model=TodoOut, status_code=201)
async def create_todo(
    todo_in: Optional[TodoCreate] = Body(default=None),
    user: User = Depends(get_current_user),
    db: InMemoryDatabase = Depends(get_db),
):
    return service.create_todo(db, user, todo_in or TodoCreate()).to_dict()

@router.put("/{todo_id}", response_model=TodoOut)
async def update_todo(
    patch: Optional[TodoUpdate] = Body(default=None),
    todo: Todo = Depends(get_current_todo),
    user: User = Depends(get_current_user),
    db: InMemoryDatabase = Depends(get_db),
):
    return service.update_todo(db, user, str(todo.id), patch or TodoUpdate()).to_dict()

@router.patch("/{todo_id}/done", response_model=TodoOut)
async def mark_todo_done(
    todo: Todo = Depends(get_current_todo),
    user: User = Depends(get_current_user),
    db: InMemoryDatabase = Depends(get_db),
):
    return service.mark_done(db, user, str(todo.id)).to_dict()

@router.delete("/{todo_id}", status_code=204)
async def delete_todo(
    todo: Todo = Depends(get_current_todo),
    user: User = Depends(get_current_user),
    db: InMemoryDatabase = Depends(get_db),
):
    service.delete_todo(db, user, str(todo.id))
    return Response(status_code=204)
