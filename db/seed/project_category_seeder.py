# db/seed/project_category_seeder.py
import logging

from models.project import Category, Project, ProjectCategory
from .base_seeder import BaseSeeder

logger = logging.getLogger(__name__)


class ProjectCategorySeeder(BaseSeeder):

    def seed(self, category_name: str) -> int:
        """
        Link every stored project to the category named `category_name`.
        Pairs that are already linked are left alone, so repeated runs add nothing.
        Returns the number of links created.
        """
        category = self.db.query(Category).filter_by(name=category_name).first()
        if not category:
            logger.info(f'Category "{category_name}" not found, no projects linked')
            return 0

        projects = self.db.query(Project).all()
        linked = {
            project_id
            for (project_id,) in self.db.query(ProjectCategory.project_id)
            .filter(ProjectCategory.category_id == category.id)
            .all()
        }

        links = [
            ProjectCategory(project_id=project.id, category_id=category.id)
            for project in projects
            if project.id not in linked
        ]
        # One commit for the whole batch: any failing link fails them all
        self.db.add_all(links)
        self.db.commit()
        return len(links)
