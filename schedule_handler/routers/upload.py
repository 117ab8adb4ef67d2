from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from schedule_handler.core.deps import get_storage_service
from schedule_handler.models.files import UploadResponse
from schedule_handler.services.storage import StorageService

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("", response_model=UploadResponse)
def upload_file(
    file: Optional[UploadFile] = File(None),
    storage: StorageService = Depends(get_storage_service),
):
    """
    Enregistre le PDF et renvoie le nom généré à passer ensuite en `pdfPath`
    lors de la création de la demande.
    """
    stored = storage.save_pdf(file)
    return UploadResponse(**stored.model_dump())
