"""User ORM — customer accounts.

Invariants:
    - UserID is an auto-incrementing integer primary key
    - Email is not unique at this layer
    - Password is stored as given (no hashing)
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from rental_api.db.base import Base


class User(Base):
    __tablename__ = "Users"

    UserID: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    Name: Mapped[str] = mapped_column(Text, nullable=False)
    Email: Mapped[str] = mapped_column(Text, nullable=False)
    Password: Mapped[str] = mapped_column(Text, nullable=False)
