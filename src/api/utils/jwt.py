from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from config import ApplicationConfig
from libs.result import Error, Result, Return

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ("id", "email", "role")


def generate_admin_token(
    admin, issued_at: Optional[datetime] = None, config=ApplicationConfig
) -> str:
    """
    Generate admin access token

    Args:
        admin: Admin entity or AdminPrincipal (id, email, role)
        issued_at: Issue time, defaults to now
        config: Config class supplying JWT_SECRET and TOKEN_TTL_HOURS

    Returns:
        JWT token string (HS256, TOKEN_TTL_HOURS expiry)
    """
    now = issued_at or datetime.now(UTC)
    role = admin.role.value if hasattr(admin.role, "value") else admin.role
    payload = {
        "id": str(admin.id),
        "email": admin.email,
        "role": role,
        "iat": now,
        "exp": now + timedelta(hours=config.TOKEN_TTL_HOURS),
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=ALGORITHM)


def verify_admin_token(token: str, config=ApplicationConfig) -> Result[dict]:
    """
    Verify and decode admin token

    Args:
        token: JWT token string
        config: Config class supplying JWT_SECRET

    Returns:
        Result with decoded claims, or Error TOKEN_EXPIRED / INVALID_TOKEN.
        Callers must not reveal which of the two occurred.
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        return Return.err(Error("TOKEN_EXPIRED", "Token has expired"))
    except JWTError as exc:
        return Return.err(Error("INVALID_TOKEN", str(exc) or "Malformed token"))

    missing = [claim for claim in REQUIRED_CLAIMS if not payload.get(claim)]
    if missing:
        return Return.err(
            Error("INVALID_TOKEN", f"Token is missing claims: {', '.join(missing)}")
        )

    return Return.ok(payload)
