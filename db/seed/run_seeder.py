# db/seed/run_seeder.py
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import get_app_env, get_log_file
from db.database import create_db_engine, init_db, session_scope
from logging_config import setup_logging
from schemas.seed import SeedDataset, SeedResult
from .admin_seeder import AdminSeeder
from .category_seeder import CategorySeeder
from .project_category_seeder import ProjectCategorySeeder
from .project_seeder import ProjectSeeder
from .seed_data import build_default_dataset

logger = logging.getLogger(__name__)


def run_seed(db: Session, dataset: SeedDataset) -> SeedResult:
    """
    Run the four seeding steps in order: admin, categories, projects, links.

    A failing step stops the run; steps already committed stay committed.
    Errors are reported through the returned SeedResult, never raised.
    """
    result = SeedResult()
    step = None
    logger.info("🌱 Seeding started...")

    try:
        step = "admin"
        logger.info("👤 Creating admin user...")
        admin = AdminSeeder(db).seed(dataset.admin)
        result.admin_email = admin.email
        result.completed_steps.append(step)

        step = "categories"
        logger.info("🏷️  Checking categories...")
        result.categories = CategorySeeder(db).seed(dataset.categories)
        logger.info(f"✅ {result.categories} categories available")
        result.completed_steps.append(step)

        step = "projects"
        logger.info("📂 Creating projects...")
        result.projects_created = ProjectSeeder(db).seed(dataset.projects)
        if result.projects_created:
            logger.info(f"✅ {result.projects_created} projects created successfully")
        result.completed_steps.append(step)

        step = "links"
        logger.info("🔗 Linking projects and categories...")
        result.links_created = ProjectCategorySeeder(db).seed(dataset.link_category)
        logger.info(f'✅ {result.links_created} projects linked to category "{dataset.link_category}"')
        result.completed_steps.append(step)

    except SQLAlchemyError as e:
        db.rollback()
        result.ok = False
        result.error_kind = "database"
        result.error = str(e)
        result.failed_step = step
    except Exception as e:
        db.rollback()
        result.ok = False
        result.error_kind = "unexpected"
        result.error = str(e)
        result.failed_step = step

    if result.ok:
        logger.info("🎉 Seeding finished successfully!")
    else:
        logger.error(f"❌ Seeding failed during '{result.failed_step}': {result.error}")
    return result


def main():
    setup_logging(get_app_env(), get_log_file())

    try:
        dataset = build_default_dataset()
        engine = create_db_engine()
    except (ValidationError, ValueError, SQLAlchemyError) as e:
        logger.error(f"❌ Could not prepare the seeding run: {e}")
        sys.exit(1)

    # The engine is disposed on exit whether or not the schema step succeeds
    with session_scope(engine) as db:
        try:
            init_db(engine)
        except SQLAlchemyError as e:
            logger.error(f"❌ Could not create the database schema: {e}")
            result = SeedResult(ok=False, error=str(e), error_kind="database", failed_step="schema")
        else:
            result = run_seed(db, dataset)

    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
