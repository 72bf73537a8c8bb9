import datetime as dt

from core.config import get_admin_credentials
from models.enums import ProjectStatus
from schemas.seed import AdminSeed, ProjectSeed, SeedDataset

# -------------------------------------------
# SEED VALUES
# -------------------------------------------

ADMIN_NAME = "Administrateur"

WEB_CATEGORY = "Site Web"

DEFAULT_CATEGORIES = (
    WEB_CATEGORY,
    "Application",
    "E-commerce",
    "Mobile",
)

DEFAULT_PROJECTS = (
    ProjectSeed(
        title="CGEPRO",
        description="Votre spécialiste du bois exotique et des aménagements extérieurs sur La Réunion",
        technologies=("WordPress", "PHP", "MySQL", "SEO"),
        client="CGEPRO",
        duration="2 mois",
        status=ProjectStatus.completed,
        image_url="/uploads/projects/cgepro.jpg",
        date=dt.date(2024, 3, 15),
        url="https://cgepro.com",
    ),
    ProjectSeed(
        title="ERIC RABY",
        description="Coaching en compétences sociales et émotionnelles",
        technologies=("React", "Node.js", "Stripe", "Calendar API"),
        client="Eric Raby Coaching",
        duration="3 mois",
        status=ProjectStatus.completed,
        image_url="/uploads/projects/eric.jpg",
        date=dt.date(2024, 4, 22),
        url="https://eric-raby.com",
    ),
    ProjectSeed(
        title="CONNECT TALENT",
        description="Plateforme de mise en relation entre entreprises et talents africains",
        technologies=("Vue.js", "Laravel", "PostgreSQL", "Socket.io"),
        client="Connect Talent Inc",
        duration="5 mois",
        status=ProjectStatus.completed,
        image_url="/uploads/projects/connect.png",
        date="10/05/2024",
        url="https://connecttalent.cc",
    ),
    ProjectSeed(
        title="SOA DIA TRAVEL",
        description="Transport & Logistique à Madagascar",
        technologies=("Angular", "Express.js", "MongoDB", "Maps API"),
        client="SOA DIA TRAVEL",
        duration="4 mois",
        status=ProjectStatus.completed,
        image_url="/uploads/projects/soa.jpg",
        date="28/06/2024",
        url="https://soatransplus.mg",
    ),
    ProjectSeed(
        title="Site E-commerce Fashion",
        description="Développement d'une plateforme e-commerce complète avec système de paiement intégré",
        technologies=("React", "Node.js", "MongoDB", "Stripe"),
        client="Fashion Boutique",
        duration="3 mois",
        status=ProjectStatus.completed,
        image_url=None,
        date="15/06/2024",
        url="https://fashion-boutique.com",
    ),
    ProjectSeed(
        title="Application Mobile Banking",
        description="Application mobile sécurisée pour la gestion bancaire avec authentification biométrique",
        technologies=("React Native", "Firebase", "Redux"),
        client="BankTech Solutions",
        duration="6 mois",
        status=ProjectStatus.in_progress,
        image_url=None,
        date="01/07/2024",
        url=None,
    ),
)


def build_default_dataset(admin_email: str | None = None, admin_password: str | None = None) -> SeedDataset:
    """The fixed demo dataset, with admin credentials taken from the environment unless given."""
    env_email, env_password = get_admin_credentials()
    return SeedDataset(
        admin=AdminSeed(
            email=admin_email or env_email,
            password=admin_password or env_password,
            name=ADMIN_NAME,
        ),
        categories=DEFAULT_CATEGORIES,
        projects=DEFAULT_PROJECTS,
        link_category=WEB_CATEGORY,
    )
