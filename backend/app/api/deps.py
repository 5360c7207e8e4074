from fastapi import Depends
from sqlalchemy.orm import Session

from app.db import get_db
from app.services.resources import ResourceService
from app.services.store import EntityStore


def get_store(db: Session = Depends(get_db)) -> EntityStore:
    return EntityStore(db)


def get_service(store: EntityStore = Depends(get_store)) -> ResourceService:
    return ResourceService(store)
