"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Connection management
  - ImageAnalysisModel, UserModel: Tables
  - image_analysis_crud, user_crud: CRUD operation singletons

Dependencies: sqlalchemy, inverselens.configs
System role: Database adapter for the relational record store
"""

from inverselens.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from inverselens.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from inverselens.boundary.db.models import ImageAnalysisModel, UserModel
from inverselens.boundary.db.CRUD import (
    BaseCRUD,
    ImageAnalysisCRUD,
    UserCRUD,
    image_analysis_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ImageAnalysisModel",
    "UserModel",
    # CRUD
    "BaseCRUD",
    "ImageAnalysisCRUD",
    "UserCRUD",
    "image_analysis_crud",
    "user_crud",
]
