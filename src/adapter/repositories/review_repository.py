from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.review_repository import IReviewRepository
from src.domain.entities import Review


class ReviewRepository(IReviewRepository):
    """Review repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, review_id: UUID) -> Optional[Review]:
        stmt = select(Review).where(Review.id == review_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(
        self,
        state: Optional[str] = None,
        approved: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Review]:
        stmt = select(Review)
        if state is not None:
            stmt = stmt.where(Review.state == state)
        if approved is not None:
            stmt = stmt.where(Review.is_approved == approved)
        stmt = stmt.order_by(Review.created_at.desc()).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, review: Review) -> Review:
        self.session.add(review)
        await self.session.flush()
        await self.session.refresh(review)
        return review

    async def delete(self, review: Review) -> None:
        await self.session.delete(review)
        await self.session.flush()

    async def get_state_stats(self, state: str) -> Dict[str, Any]:
        stmt = select(
            func.count(Review.id), func.avg(Review.rating), func.avg(Review.wages)
        ).where(Review.state == state, Review.is_approved == True)
        result = await self.session.execute(stmt)
        count, avg_rating, avg_wage = result.one()
        return {
            "state": state,
            "review_count": count or 0,
            "avg_rating": round(float(avg_rating or 0), 1),
            "avg_wage": round(float(avg_wage or 0), 2),
        }

    async def get_all_states_stats(self) -> List[Dict[str, Any]]:
        avg_rating = func.avg(Review.rating)
        stmt = (
            select(Review.state, func.count(Review.id), avg_rating, func.avg(Review.wages))
            .where(Review.is_approved == True)
            .group_by(Review.state)
            .order_by(avg_rating.desc())
        )
        result = await self.session.execute(stmt)
        return [
            {
                "state": state,
                "review_count": count,
                "avg_rating": round(float(rating), 1),
                "avg_wage": round(float(wage), 2),
            }
            for state, count, rating, wage in result.all()
        ]

    async def get_state_analytics(self) -> List[Dict[str, Any]]:
        # one row per (state, visitor) first, so repeat reviewers count once
        visitors = (
            select(
                Review.state.label("state"),
                Review.user_id.label("user_id"),
                func.max(Review.times_used).label("times_used"),
            )
            .where(Review.is_approved == True, Review.tos_accepted == True)
            .group_by(Review.state, Review.user_id)
            .subquery()
        )
        total_visitors = func.count(visitors.c.user_id)
        stmt = (
            select(visitors.c.state, total_visitors, func.avg(visitors.c.times_used))
            .group_by(visitors.c.state)
            .order_by(total_visitors.desc(), visitors.c.state)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "state": state,
                "total_visitors": count,
                "avg_revisit": round(float(avg_revisit or 0), 2),
            }
            for state, count, avg_revisit in result.all()
        ]
