# db/seed/project_seeder.py
import json
import logging
import re

from models.project import Project
from schemas.seed import ProjectSeed
from .base_seeder import BaseSeeder

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """'Site E-commerce Fashion' -> 'site-e-commerce-fashion'"""
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def to_row(project: ProjectSeed) -> dict:
    return {
        "title": project.title,
        "slug": slugify(project.title),
        "description": project.description,
        "technologies": json.dumps(list(project.technologies)),
        "client": project.client,
        "duration": project.duration,
        "status": project.status,
        "image_url": project.image_url,
        "date": project.date,
        "url": project.url,
    }


class ProjectSeeder(BaseSeeder):

    def seed(self, projects) -> int:
        """Insert `projects` into an empty table. Returns the number of rows created."""
        existing_count = self.db.query(Project).count()
        if existing_count > 0:
            logger.info(f"⏩ {existing_count} projects already exist, skipping...")
            return 0

        # The table is empty here, so only slugs repeated within the batch can clash
        taken = set()
        rows = []
        for project in projects:
            row = to_row(project)
            if row["slug"] in taken:
                logger.warning(f"Skipping duplicate project slug: {row['slug']}")
                continue
            taken.add(row["slug"])
            rows.append(Project(**row))

        self.db.add_all(rows)
        self.db.commit()
        logger.info(f"{len(rows)} projects created")
        return len(rows)
