import random
from decimal import Decimal
from datetime import datetime

from faker import Faker
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import Base, DataSessionLocal, data_engine
from .app.crud.category_crud import category_name_exists, get_category_by_name
from .app.crud.product_crud import product_name_exists
from .app.models import Category, Inventory, Product

# Create tables
Base.metadata.create_all(bind=data_engine)

fake = Faker()

CATALOGUE = {
    "Electronics": ["Laptop HP", "Mouse Logitech", "Monitor Dell 24", "USB-C Hub"],
    "Office": ["Printer Paper A4", "Stapler", "Whiteboard Markers"],
    "Furniture": ["Ergonomic Chair", "Standing Desk"],
}


def seed_data():
    db: Session = DataSessionLocal()
    try:
        for category_name, product_names in CATALOGUE.items():
            if category_name_exists(db, category_name):
                category = get_category_by_name(db, category_name)
            else:
                category = Category(name=category_name, description=fake.sentence(nb_words=6))
                db.add(category)
                db.flush()  # ensures category.id is available

            for product_name in product_names:
                if product_name_exists(db, product_name):
                    continue
                product = Product(
                    name=product_name,
                    description=fake.sentence(nb_words=8),
                    price=Decimal(random.randint(500, 150000)) / 100,
                    category_id=category.id,
                )
                db.add(product)
                db.flush()

                min_stock = settings.DEFAULT_MIN_STOCK
                # roughly a third of the catalogue starts below its threshold
                quantity = random.randint(0, min_stock) if random.random() < 0.35 \
                    else random.randint(min_stock + 1, min_stock * 10)
                db.add(Inventory(
                    product_id=product.id,
                    quantity=quantity,
                    min_stock=min_stock,
                    updated_at=datetime.now(),
                ))

        db.commit()
        print("✅ Seed data inserted successfully")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
