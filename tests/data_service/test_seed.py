from data_service.app.models import Category, Inventory, Product
from data_service.seed import CATALOGUE, seed_data


def test_seed_is_idempotent(db):
    seed_data()
    seed_data()

    expected_products = sum(len(names) for names in CATALOGUE.values())
    assert db.query(Category).count() == len(CATALOGUE)
    assert db.query(Product).count() == expected_products
    assert db.query(Inventory).count() == expected_products


def test_seed_reuses_existing_category_with_different_case(db):
    db.add(Category(name="electronics"))
    db.commit()

    seed_data()

    db.expire_all()
    assert db.query(Category).filter(Category.name.ilike("electronics")).count() == 1
    existing = db.query(Category).filter(Category.name == "electronics").one()
    laptop = db.query(Product).filter(Product.name == "Laptop HP").one()
    assert laptop.category_id == existing.id
