"""
User ORM model.

Carried in the schema for future account support; no route uses it yet.

Dependencies: sqlalchemy, inverselens.boundary.db.base
System role: User persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from inverselens.boundary.db.base import Base, UUIDMixin


class UserModel(Base, UUIDMixin):
    """
    User ORM model.

    Attributes:
        id: String UUID primary key
        username: Unique login name
        password: Stored password value
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
