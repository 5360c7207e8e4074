from sqlalchemy import Column, Date, String, Time

from app.db import Base
from app.models.mixins import EntityMixin


class Event(EntityMixin, Base):
    __tablename__ = "events"

    title = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    # Optional local time of day; API speaks 'HH:MM'
    time = Column(Time, nullable=True)
    description = Column(String, nullable=True)
