"""
CRUD operations for database models.

Usage:
    from inverselens.boundary.db.CRUD import image_analysis_crud

    row = await image_analysis_crud.get_by_id(db, analysis_id)
"""

from inverselens.boundary.db.CRUD.base_crud import BaseCRUD
from inverselens.boundary.db.CRUD.image_analysis_crud import (
    ImageAnalysisCRUD,
    image_analysis_crud,
)
from inverselens.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "ImageAnalysisCRUD",
    "image_analysis_crud",
    "UserCRUD",
    "user_crud",
]
