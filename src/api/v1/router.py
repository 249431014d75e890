"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.auth import router as auth_router
from api.v1.routes.blog_posts import router as blog_posts_router
from api.v1.routes.contact_submissions import router as contact_router
from api.v1.routes.feeds import router as feeds_router
from api.v1.routes.projects import router as projects_router
from api.v1.routes.resumes import router as resumes_router
from api.v1.routes.testimonials import router as testimonials_router
from api.v1.routes.uploads import router as uploads_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(projects_router)
router.include_router(blog_posts_router)
router.include_router(testimonials_router)
router.include_router(contact_router)
router.include_router(resumes_router)
router.include_router(uploads_router)
router.include_router(feeds_router)
