from sqlalchemy import Boolean, Column, Date, ForeignKey, String, false
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import EntityMixin


class SchoolClass(EntityMixin, Base):
    __tablename__ = "classes"

    name = Column(String, nullable=False)

    # Deleting a class takes its work items and important dates with it
    work_items = relationship(
        "WorkItem",
        back_populates="school_class",
        cascade="all, delete-orphan",
    )
    important_dates = relationship(
        "ImportantDate",
        back_populates="school_class",
        cascade="all, delete-orphan",
    )


class WorkItem(EntityMixin, Base):
    __tablename__ = "work_items"

    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())

    class_id = Column(
        String(36), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    school_class = relationship("SchoolClass", back_populates="work_items")


class ImportantDate(EntityMixin, Base):
    __tablename__ = "important_dates"

    title = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)

    class_id = Column(
        String(36), ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    school_class = relationship("SchoolClass", back_populates="important_dates")
