"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from foodtech.api import auth, classes, inventory, notifications, orders, recipes, shopping_lists
from foodtech.config import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    yield


app = FastAPI(
    title="Food Tech Class Manager API",
    description="Recipes, storeroom inventory, student orders and shopping lists "
    "for food-technology classes",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:3001"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(auth.router)
app.include_router(recipes.router)
app.include_router(inventory.router)
app.include_router(classes.router)
app.include_router(orders.router)
app.include_router(shopping_lists.router)
app.include_router(notifications.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
