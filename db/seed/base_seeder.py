# db/seed/base_seeder.py
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

class BaseSeeder:
    def __init__(self, db: Session):
        self.db = db

    def find_or_create(self, model, defaults=None, **filters):
        """
        Look up by `filters`. If not found, create with {**filters, **defaults}.
        - `filters`: columns used to uniquely identify the row (passed to filter_by).
        - `defaults`: extra fields set only when creating a new row.
        Returns (instance, created).
        """
        instance = self.db.query(model).filter_by(**filters).first()
        if instance:
            return instance, False

        payload = {**(defaults or {}), **filters}
        instance = model(**payload)
        self.db.add(instance)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Another writer may have inserted the same row in between
            existing = self.db.query(model).filter_by(**filters).first()
            if existing:
                logger.debug(f"{model.__name__} {filters} inserted concurrently, reusing it")
                return existing, False
            raise
        else:
            self.db.refresh(instance)
        return instance, True

    def upsert(self, model, values, **filters):
        """
        Insert-or-update keyed by `filters`: an existing row gets `values`
        written over it, a missing one is created with {**values, **filters}.
        """
        instance = self.db.query(model).filter_by(**filters).first()
        if instance is None:
            instance, created = self.find_or_create(model, defaults=values, **filters)
            if created:
                return instance, True

        for field, value in values.items():
            setattr(instance, field, value)
        self.db.commit()
        self.db.refresh(instance)
        return instance, False
