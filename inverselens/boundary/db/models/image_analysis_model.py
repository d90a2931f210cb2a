"""
Image analysis ORM model.

One row per successful analysis: upload metadata, the base64 image, and the
original/mirror perspectives flattened into columns. Element lists are
stored as JSON text.

Dependencies: sqlalchemy, inverselens.boundary.db.base
System role: Analysis record persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inverselens.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class ImageAnalysisModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Image analysis ORM model.

    Attributes:
        id: String UUID primary key (auto-generated when not supplied)
        original_filename: Filename as uploaded
        image_data: Base64-encoded image
        original_description: Literal description
        original_elements: JSON array text of literal key elements
        original_mood: Literal mood
        mirror_description: Inverted description
        mirror_elements: JSON array text of inverted key elements
        mirror_mood: Inverted mood
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "image_analyses"

    original_filename: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Filename as supplied by the uploader",
    )

    image_data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Base64-encoded original image",
    )

    original_description: Mapped[str] = mapped_column(Text, nullable=False)
    original_elements: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="JSON array of strings",
    )
    original_mood: Mapped[str] = mapped_column(Text, nullable=False)

    mirror_description: Mapped[str] = mapped_column(Text, nullable=False)
    mirror_elements: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="JSON array of strings",
    )
    mirror_mood: Mapped[str] = mapped_column(Text, nullable=False)
