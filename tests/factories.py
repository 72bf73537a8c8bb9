import datetime as dt
import uuid

from models.enums import ProjectStatus
from schemas.seed import AdminSeed, ProjectSeed, SeedDataset


def fake_uuid():
    return str(uuid.uuid4())


def fake_admin(email="admin@example.com", password="AdminPass123"):
    return AdminSeed(email=email, password=password, name="Administrateur")


def fake_project_seed(title=None, **overrides):
    payload = {
        "title": title or "Project " + fake_uuid()[0:5],
        "description": "Test project",
        "technologies": ("Python", "SQLAlchemy"),
        "client": "Test Client",
        "duration": "1 mois",
        "status": ProjectStatus.completed,
        "image_url": None,
        "date": dt.date(2024, 1, 1),
        "url": None,
    }
    payload.update(overrides)
    return ProjectSeed(**payload)


def fake_dataset(projects=None, categories=("Site Web", "Mobile"), link_category="Site Web"):
    return SeedDataset(
        admin=fake_admin(),
        categories=categories,
        projects=projects if projects is not None else (fake_project_seed(), fake_project_seed()),
        link_category=link_category,
    )
