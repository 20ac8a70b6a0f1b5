"""
User read use cases
"""
from typing import List, Optional

from app.domain.entities import User
from app.domain.ports import UserRepository


class GetAllUsersUseCase:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self) -> List[User]:
        return await self.user_repo.find_all()


class GetUserByIdUseCase:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, user_id: str) -> Optional[User]:
        return await self.user_repo.find_by_id(user_id)
