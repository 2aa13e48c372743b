# business_service/app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.logging_config import setup_logging
from shared.core.schemas import HealthOut
from shared.exception_handler import setup_exception_handlers
from .routers import category_router, product_router, report_router

setup_logging()

app = FastAPI(title="Inventory Business Service API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Routers
app.include_router(product_router.router)
app.include_router(category_router.router)
app.include_router(report_router.router)


@app.get("/api/health", response_model=HealthOut)
def health():
    return {"status": "healthy"}
