from fastapi import APIRouter
from app.api.v1.endpoints import auth, users, plots, applications, payments, documents, notifications, sample

api_router = APIRouter()


@api_router.get("/health", tags=["Health"])
async def health_check():
    """Simple health check endpoint for load balancer"""
    return {"status": "healthy", "service": "landrecords-backend"}


api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(users.router, prefix="/users", tags=["User"])
api_router.include_router(plots.router, prefix="/plots", tags=["Plot"])
api_router.include_router(applications.router, prefix="/applications", tags=["Application"])
api_router.include_router(payments.router, prefix="/payments", tags=["Payment"])
api_router.include_router(documents.router, prefix="/documents", tags=["Documents"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["Notification"])
api_router.include_router(sample.router, prefix="/sample", tags=["SampleData"])
