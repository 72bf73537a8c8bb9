# Importing every model registers its table on Base.metadata
from .base import Base
from .enums import ProjectStatus, UserRole
from .project import Category, Project, ProjectCategory
from .user import User
