from sqlalchemy import Column, String

from app.db import Base
from app.models.mixins import EntityMixin


class Idea(EntityMixin, Base):
    __tablename__ = "ideas"

    content = Column(String, nullable=False)
