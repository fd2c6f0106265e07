# Third-party imports
from fastapi import APIRouter

# Local application imports
from bookclub.api.internal.routes.v1.books import book_router, portal_router, suggestion_router

router = APIRouter()

# Include all internal v1 routers
router.include_router(portal_router)
router.include_router(suggestion_router)
router.include_router(book_router)
