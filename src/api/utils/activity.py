"""
Activity Logging

Last stage before the handler: records what an admin changed, once the
change has succeeded.
"""

import logging
from functools import wraps
from typing import Any, Dict, Optional

from pydantic import BaseModel
from starlette.responses import Response

from src.api.utils.context import AdminContext
from src.domain.entities import ActivityAction, TargetType

logger = logging.getLogger(__name__)


def _find_context(args, kwargs) -> Optional[AdminContext]:
    for value in list(kwargs.values()) + list(args):
        if isinstance(value, AdminContext):
            return value
    return None


def _status_code(result, args, kwargs) -> int:
    if isinstance(result, Response):
        return result.status_code
    # FastAPI leaves status_code None on an injected Response the handler did not touch
    for value in list(kwargs.values()) + list(args):
        if isinstance(value, Response) and value.status_code is not None:
            return value.status_code
    return 200


def _body_snapshot(args, kwargs) -> Optional[Dict[str, Any]]:
    for value in list(kwargs.values()) + list(args):
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")
    return None


def log_activity(
    action: ActivityAction, target_type: TargetType, id_param: Optional[str] = None
):
    """
    Wrap an admin endpoint so a successful call leaves one activity entry.

    The handler must take an AdminContext (from a RoleGate). After it
    returns, the response status decides: 2xx writes exactly one entry,
    anything else writes none. A handler that raises writes none. Plain
    return values (models, dicts) are rendered with the route's success
    status and count as 2xx, unless the handler set a status on its
    injected Response.

    Args:
        action: Activity action recorded
        target_type: Kind of object the route acts on
        id_param: Path parameter holding the target id; defaults to the
            route's only path parameter
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            response = await func(*args, **kwargs)

            status_code = _status_code(response, args, kwargs)
            if not 200 <= status_code < 300:
                return response

            ctx = _find_context(args, kwargs)
            if ctx is None:
                logger.warning("log_activity on %s has no AdminContext", func.__name__)
                return response

            if id_param is not None:
                target_id = ctx.path_params.get(id_param)
            else:
                target_id = next(iter(ctx.path_params.values()), None)

            await ctx.audit.record_activity(
                admin_id=ctx.admin.id,
                action=action,
                target_type=target_type,
                ip=ctx.ip,
                user_agent=ctx.user_agent,
                target_id=str(target_id) if target_id is not None else None,
                details={
                    "method": ctx.method,
                    "path": ctx.path,
                    "query": ctx.query,
                    "body": _body_snapshot(args, kwargs),
                },
            )
            return response

        return wrapper

    return decorator
