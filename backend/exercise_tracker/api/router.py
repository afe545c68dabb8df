"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from exercise_tracker.api.routes import users, exercises

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(exercises.router)
