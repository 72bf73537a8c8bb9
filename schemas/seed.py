import datetime as dt
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional

from models.enums import ProjectStatus, UserRole

# Dataset dates are written day-first (fr-FR locale), e.g. "28/06/2024"
DAY_FIRST_FORMAT = "%d/%m/%Y"


def parse_seed_date(value) -> dt.date:
    """Normalize a seed date to ``datetime.date``.

    Accepted inputs: a ``date``/``datetime``, an ISO ``YYYY-MM-DD`` string,
    or a day-first ``DD/MM/YYYY`` string. Anything else raises ``ValueError``.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return dt.datetime.strptime(text, DAY_FIRST_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD or DD/MM/YYYY") from None


class AdminSeed(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = "Administrateur"
    role: UserRole = UserRole.admin


class ProjectSeed(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    description: str
    technologies: tuple[str, ...] = ()
    client: str
    duration: str
    status: ProjectStatus = ProjectStatus.completed
    image_url: Optional[str] = None
    date: dt.date
    url: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return parse_seed_date(value)


class SeedDataset(BaseModel):
    """Everything one seeding run writes. Immutable so it can be shared safely."""
    model_config = ConfigDict(frozen=True)

    admin: AdminSeed
    categories: tuple[str, ...]
    projects: tuple[ProjectSeed, ...]
    link_category: str = "Site Web"

    @field_validator("categories")
    @classmethod
    def strip_categories(cls, value):
        return tuple(name.strip() for name in value if name and name.strip())


class SeedResult(BaseModel):
    """Outcome of a seeding run. `error_kind` is set only when `ok` is False."""
    ok: bool = True
    error: Optional[str] = None
    error_kind: Optional[Literal["database", "unexpected"]] = None
    failed_step: Optional[str] = None
    admin_email: Optional[str] = None
    categories: int = 0
    projects_created: int = 0
    links_created: int = 0
    completed_steps: List[str] = []
