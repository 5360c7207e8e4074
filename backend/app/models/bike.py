from sqlalchemy import Column, Date, String

from app.db import Base
from app.models.mixins import EntityMixin


class BikeIdea(EntityMixin, Base):
    __tablename__ = "bike_ideas"

    content = Column(String, nullable=False)


class BikeEvent(EntityMixin, Base):
    __tablename__ = "bike_events"

    title = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    # race, trip, service, maintenance, other (free text)
    type = Column(String(40), nullable=False, server_default="race")
