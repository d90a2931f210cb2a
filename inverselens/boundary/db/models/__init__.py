"""
Database models package.

Exports:
  - ImageAnalysisModel: analysis record table
  - UserModel: user table
"""

from inverselens.boundary.db.models.image_analysis_model import ImageAnalysisModel
from inverselens.boundary.db.models.user_model import UserModel

__all__ = [
    "ImageAnalysisModel",
    "UserModel",
]
