from sqlalchemy import func

from db.seed.category_seeder import CategorySeeder
from models.project import Category


def test_create_categories(db):
    attempted = CategorySeeder(db).seed(("Site Web", "Application", "E-commerce", "Mobile"))

    assert attempted == 4
    names = {c.name for c in db.query(Category).all()}
    assert names == {"Site Web", "Application", "E-commerce", "Mobile"}


def test_overlapping_runs_do_not_duplicate(db):
    seeder = CategorySeeder(db)
    seeder.seed(("Site Web", "Mobile"))
    seeder.seed(("Mobile", "E-commerce", "Mobile"))

    duplicates = (
        db.query(Category.name, func.count(Category.id))
        .group_by(Category.name)
        .having(func.count(Category.id) > 1)
        .all()
    )
    assert duplicates == []
    assert db.query(Category).count() == 3


def test_existing_category_is_kept(db):
    existing = Category(name="Site Web")
    db.add(existing)
    db.commit()

    CategorySeeder(db).seed(("Site Web",))

    assert db.query(Category).one().id == existing.id
