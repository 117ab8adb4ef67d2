from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE

from schedule_handler.core.config import get_settings
from schedule_handler.core.errors import StoreError
from schedule_handler.services.json_store import JsonStore

router = APIRouter(tags=["system"])


def _store_state(path: Path) -> str:
    """ok | missing (créé au premier appel) | unreadable"""
    if not path.exists():
        return "missing"
    try:
        JsonStore(path).load()
    except StoreError:
        return "unreadable"
    return "ok"


@router.get("/health")
def health():
    """
    Lecture seule : ne crée ni dossier ni store.
    503 dès qu'un store JSON est illisible.
    """
    s = get_settings()
    stores = {
        "sessions": _store_state(s.sessions_file),
        "users": _store_state(s.users_file),
    }
    degraded = "unreadable" in stores.values()
    payload = {
        "status": "degraded" if degraded else "ok",
        "version": s.APP_VERSION,
        "dataDir": Path(s.DATA_PATH).is_dir(),
        "uploadsDir": s.uploads_dir.is_dir(),
        "stores": stores,
    }
    return JSONResponse(payload, status_code=HTTP_503_SERVICE_UNAVAILABLE if degraded else HTTP_200_OK)


@router.get("/version")
def version():
    s = get_settings()
    return {"name": s.APP_NAME, "version": s.APP_VERSION, "env": s.APP_ENV}
