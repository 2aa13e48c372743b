# data_service/app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, data_engine
from shared.core.logging_config import setup_logging
from shared.core.schemas import HealthOut
from shared.exception_handler import setup_exception_handlers
from .models import categories, products, inventory  # noqa: F401 (register tables)
from .router import category_router, product_router, inventory_router

setup_logging()

# Create tables
Base.metadata.create_all(bind=data_engine)

app = FastAPI(title="Inventory Data Service API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(product_router.router)
app.include_router(category_router.router)
app.include_router(inventory_router.router)


@app.get("/data/health", response_model=HealthOut)
def health():
    return {"status": "healthy"}
