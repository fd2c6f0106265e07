# Third-party imports
from fastapi import APIRouter

# Local application imports
from bookclub.api.internal.routes.v1.routes import router as v1_router

router = APIRouter()
# Include internal API routers
router.include_router(v1_router)
