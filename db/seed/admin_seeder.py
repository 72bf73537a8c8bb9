# db/seed/admin_seeder.py
import logging

from core.security import hash_password
from models.user import User
from schemas.seed import AdminSeed
from .base_seeder import BaseSeeder

logger = logging.getLogger(__name__)


class AdminSeeder(BaseSeeder):

    def seed(self, admin: AdminSeed) -> User:
        """Create the admin account, or overwrite its password, name and role."""
        values = {
            "hashed_password": hash_password(admin.password),
            "name": admin.name,
            "role": admin.role,
        }
        user, created = self.upsert(User, values, email=admin.email)
        logger.info(f"Admin {'created' if created else 'updated'}: {user.email} (ID: {user.id})")
        return user
