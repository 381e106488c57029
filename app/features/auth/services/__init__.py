from app.features.auth.services.user_service import UserService

__all__ = ["UserService"]
