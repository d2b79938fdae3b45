from fastapi import APIRouter, Depends
from typing import List, Optional

from todoapp.api.deps import get_todo_service
from todoapp.schemas.todo import TodoCreate, TodoOut, TodoUpdate
from todoapp.services.todos import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])

@router.get("", response_model=List[TodoOut])
async def list_todos(service: TodoService = Depends(get_todo_service)):
    return service.list_todos()

@router.post("", response_model=TodoOut, status_code=201)
async def create_todo(data: Optional[TodoCreate] = None, service: TodoService = Depends(get_todo_service)):
    return service.create_todo(data or TodoCreate())

@router.get("/{todo_id}", response_model=TodoOut)
async def get_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    return service.get_todo(todo_id)

@router.put("/{todo_id}", response_model=TodoOut)
async def update_todo(todo_id: str, data: Optional[TodoUpdate] = None, service: TodoService = Depends(get_todo_service)):
    return service.update_todo(todo_id, data or TodoUpdate())

@router.delete("/{todo_id}", response_model=TodoOut)
async def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    return service.delete_todo(todo_id)
