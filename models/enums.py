from enum import Enum


# ------------------- ENUMS ------------------------------------------ #
class UserRole(str, Enum):
    admin = "ADMIN"
    user = "USER"


class ProjectStatus(str, Enum):
    completed = "COMPLETED"
    in_progress = "IN_PROGRESS"


def enum_values(enum_cls):
    """Persist enum values ("ADMIN") rather than member names ("admin")."""
    return [member.value for member in enum_cls]
