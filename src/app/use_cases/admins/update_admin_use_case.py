"""
Update Admin Use Case

Role changes, activation/deactivation and manual unlock.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminPrincipal
from .dtos import AdminResponse, UpdateAdminCommand


class UpdateAdminUseCase:
    """
    Business Rules:
    - A super admin cannot change their own role or deactivate themselves
    - Deactivating an admin revokes all of their sessions
    - unlock clears login_attempts and locked_until
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_admin_id: UUID, target_admin_id: UUID, command: UpdateAdminCommand
    ) -> Result[AdminResponse]:
        async with self.uow:
            admin = await self.uow.admins.get_by_id(target_admin_id)
            if admin is None:
                return Return.err(Error("ADMIN_NOT_FOUND", "Admin not found"))

            if acting_admin_id == target_admin_id and (
                (command.role is not None and command.role != admin.role)
                or command.is_active is False
            ):
                return Return.err(
                    Error(
                        "CANNOT_MODIFY_SELF",
                        "You cannot change your own role or deactivate yourself",
                    )
                )

            if command.role is not None:
                admin.role = command.role

            if command.is_active is not None:
                admin.is_active = command.is_active
                if not command.is_active:
                    await self.uow.admin_sessions.revoke_all_by_admin_id(admin.id)

            if command.unlock:
                admin.reset_login_attempts()

            admin = await self.uow.admins.update(admin)
            await self.uow.commit()

            return Return.ok(
                AdminResponse(message="Admin updated", admin=AdminPrincipal.from_entity(admin))
            )
