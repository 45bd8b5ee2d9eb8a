"""
Under-development public routes

Agency reviews and reports are not backed by a store yet; every method on
those paths answers 503 so clients can tell "coming soon" from "missing".
"""

from fastapi import APIRouter, Depends

from libs.result import Error
from src.api.error import ClientError
from src.api.utils.rate_limit import public_rate_limit

STUB_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

router = APIRouter(dependencies=[Depends(public_rate_limit)])


def _under_development(feature: str) -> ClientError:
    return ClientError(
        Error(
            "FEATURE_UNAVAILABLE",
            f"{feature} features are under development. Database integration required.",
        ),
        extra={"underDevelopment": True},
    )


@router.api_route("/agency-reviews{rest:path}", methods=STUB_METHODS)
async def agency_reviews(rest: str = ""):
    raise _under_development("Agency review")


@router.api_route("/reports{rest:path}", methods=STUB_METHODS)
async def reports(rest: str = ""):
    raise _under_development("Report")
