import uuid
from sqlalchemy import UUID, Column, Date, DateTime, Enum, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship
from models.base import Base
from models.enums import ProjectStatus, enum_values


# ---------------- Project ----------------
class Project(Base):
    __tablename__ = "projects"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False, index=True)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False)
    technologies = Column(Text, nullable=False, default="[]")  # JSON list, order preserved
    client = Column(String(255), nullable=False)
    duration = Column(String(100), nullable=False)
    status = Column(
        Enum(ProjectStatus, name="projectstatus", values_callable=enum_values),
        default=ProjectStatus.completed,
        nullable=False,
    )
    image_url = Column(String, nullable=True)
    date = Column(Date, nullable=False)
    url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # One-to-many: Project <-> ProjectCategory (junction for Category)
    categories_link = relationship(
        "ProjectCategory",
        back_populates="project",
        cascade="all, delete-orphan"
    )


# ---------------- Categories ----------------
class Category(Base):
    __tablename__ = "categories"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    projects_link = relationship(
        "ProjectCategory",
        back_populates="category",
        cascade="all, delete-orphan"
    )


# ---------------- Junction: Project <-> Category ----------------
class ProjectCategory(Base):
    __tablename__ = "project_categories"
    __table_args__ = (
        UniqueConstraint("project_id", "category_id", name="uq_project_category"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    project_id = Column(UUID(as_uuid=True), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    project = relationship("Project", back_populates="categories_link")
    category = relationship("Category", back_populates="projects_link")
