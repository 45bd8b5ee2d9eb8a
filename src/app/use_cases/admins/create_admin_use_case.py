"""
Create Admin Use Case

Provisions a new back-office account.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.login_use_case import BCRYPT_ROUNDS
from src.domain.base import normalize_email
from src.domain.entities import Admin, AdminPrincipal
from .dtos import AdminResponse, CreateAdminCommand


class CreateAdminUseCase:
    """
    Business Rules:
    - Email is normalised and must be unique
    - Password is stored as a bcrypt hash only
    - New admins start active and unlocked
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateAdminCommand) -> Result[AdminResponse]:
        email = normalize_email(command.email)

        async with self.uow:
            existing = await self.uow.admins.get_by_email(email)
            if existing is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "An admin with this email already exists")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode(), bcrypt.gensalt(BCRYPT_ROUNDS)
            ).decode()

            admin = Admin(
                email=email,
                password_hash=password_hash,
                first_name=command.first_name.strip(),
                last_name=command.last_name.strip(),
                role=command.role,
            )
            admin = await self.uow.admins.create(admin)
            await self.uow.commit()

            return Return.ok(
                AdminResponse(message="Admin created", admin=AdminPrincipal.from_entity(admin))
            )
