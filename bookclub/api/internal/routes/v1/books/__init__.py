from .book_routes import router as book_router
from .portal_routes import router as portal_router
from .suggestion_routes import router as suggestion_router

__all__ = ["book_router", "portal_router", "suggestion_router"]
