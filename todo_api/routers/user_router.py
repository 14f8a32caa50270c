from fastapi import APIRouter, Depends

from todo_api.database import InMemoryDatabase, get_db
from todo_api.schemas.user import UserCreate, UserOut
from todo_api.services.user_service import UserService

router = APIRouter()
service = UserService()

@router.post("", response_model=UserOut, status_code=201)
async def create_user(user_in: UserCreate, db: InMemoryDatabase = Depends(get_db)):
    return service.create_user(db, user_in).to_dict()
