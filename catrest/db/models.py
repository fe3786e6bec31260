"""SQLAlchemy table descriptor for stored cats."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class CatRow(Base):
    __tablename__ = "cats"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    breed = Column(Text, nullable=False)
    snack = Column(Text, nullable=False)

    def as_row(self) -> dict:
        return {"id": self.id, "name": self.name, "breed": self.breed, "snack": self.snack}
