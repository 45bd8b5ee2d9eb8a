"""
List Admins Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminPrincipal
from .dtos import AdminsResponse


class ListAdminsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[AdminsResponse]:
        async with self.uow:
            admins = await self.uow.admins.list_all()
            return Return.ok(
                AdminsResponse(admins=[AdminPrincipal.from_entity(a) for a in admins])
            )
