"""
Image analysis CRUD operations.

Extends BaseCRUD with the recency query used by the record store.

Dependencies: sqlalchemy, inverselens.boundary.db.models
System role: Analysis record persistence
"""

from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from inverselens.boundary.db.CRUD.base_crud import BaseCRUD
from inverselens.boundary.db.models.image_analysis_model import ImageAnalysisModel


class ImageAnalysisCRUD(BaseCRUD[ImageAnalysisModel]):
    """CRUD operations for ImageAnalysisModel."""

    def __init__(self) -> None:
        """Initialize ImageAnalysisCRUD with ImageAnalysisModel."""
        super().__init__(ImageAnalysisModel)

    async def get_recent(
        self,
        session: AsyncSession,
        limit: int,
    ) -> Sequence[ImageAnalysisModel]:
        """
        Retrieve the most recent analyses, newest first.

        Equal timestamps are ordered by id descending so the result is
        deterministic for a given table state.

        Args:
            session: Async database session
            limit: Maximum number of rows to return

        Returns:
            Sequence of ImageAnalysisModel, newest first
        """
        stmt = (
            select(ImageAnalysisModel)
            .order_by(desc(ImageAnalysisModel.created_at), desc(ImageAnalysisModel.id))
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


image_analysis_crud = ImageAnalysisCRUD()
