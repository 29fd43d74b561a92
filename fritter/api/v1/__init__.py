from fastapi import APIRouter
from .users import router as users_router
from .freets import router as freets_router
from .quotes import router as quotes_router
from .likes import router as likes_router
from .fritforms import router as fritforms_router

router = APIRouter()

router.include_router(users_router, prefix="/users", tags=["users"])
router.include_router(freets_router, prefix="/freets", tags=["freets"])
router.include_router(quotes_router, prefix="/quotes", tags=["quotes"])
router.include_router(likes_router, prefix="/likes", tags=["likes"])
router.include_router(fritforms_router, prefix="/fritforms", tags=["fritforms"])
