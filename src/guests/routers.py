from fastapi import APIRouter

from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(submit_rsvp_router)
