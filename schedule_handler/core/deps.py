from schedule_handler.core.config import get_settings
from schedule_handler.services.json_store import JsonStore
from schedule_handler.services.sessions import SessionService
from schedule_handler.services.storage import StorageService
from schedule_handler.services.users import UserService


def get_storage_service() -> StorageService:
    """
    Fournit le service de stockage des PDF en dépendance (DI).
    """
    settings = get_settings()
    return StorageService(base_path=settings.uploads_dir, max_upload_mb=settings.MAX_UPLOAD_MB)


def get_session_service() -> SessionService:
    settings = get_settings()
    return SessionService(
        store=JsonStore(settings.sessions_file),
        storage=get_storage_service(),
    )


def get_user_service() -> UserService:
    settings = get_settings()
    return UserService(
        store=JsonStore(settings.users_file),
        seed_defaults=settings.SEED_DEFAULT_USERS,
    )
