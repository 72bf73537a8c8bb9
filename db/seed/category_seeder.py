# db/seed/category_seeder.py
from .base_seeder import BaseSeeder
from models.project import Category


class CategorySeeder(BaseSeeder):

    def seed(self, names) -> int:
        for name in dict.fromkeys(names):
            self.find_or_create(Category, name=name)
        return len(names)
