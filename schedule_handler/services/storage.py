import base64
import logging
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from pypdf import PdfReader

from schedule_handler.core.errors import PayloadTooLargeError, ValidationError
from schedule_handler.models.files import StoredFile

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


class StorageService:
    """
    Service de gestion des PDF uploadés, stockés localement.
    Les fichiers sont nommés `<uuid>.<extension d'origine>`, le nom
    d'origine est conservé à part dans la demande de session.
    """

    def __init__(self, base_path: Path | str = "./data/uploads", max_upload_mb: int = 25):
        self.base_path = Path(base_path)
        self.max_upload_bytes = max_upload_mb * 1024 * 1024
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path_for(self, file_name: str) -> Path:
        # Seul le dernier segment compte (pdfPath peut être un chemin complet)
        name = Path(file_name.replace("\\", "/")).name
        return self.base_path / name

    def save_pdf(self, file: Optional[UploadFile]) -> StoredFile:
        """
        Sauvegarde un PDF uploadé. Rien n'est écrit si le fichier est refusé.
        """
        if file is None or not file.filename:
            raise ValidationError("No file provided")

        if file.content_type != PDF_MIME_TYPE:
            raise ValidationError("Only PDF files are allowed")

        contents = file.file.read()
        if len(contents) > self.max_upload_bytes:
            raise PayloadTooLargeError(
                f"File too large (max {self.max_upload_bytes // (1024 * 1024)} MB)"
            )

        extension = Path(file.filename).suffix.lstrip(".") or "pdf"
        file_name = f"{uuid.uuid4()}.{extension}"
        dest_path = self.base_path / file_name

        with open(dest_path, "wb") as f:
            f.write(contents)

        logger.info("Upload %s enregistré sous %s (%d octets)", file.filename, file_name, len(contents))
        return StoredFile(
            fileName=file_name,
            originalName=file.filename,
            size=dest_path.stat().st_size,
            pages=self.count_pages(dest_path),
        )

    def count_pages(self, path: Path) -> int:
        try:
            return len(PdfReader(str(path)).pages)
        except Exception as e:
            # Contenu déclaré PDF mais illisible : on garde le fichier
            logger.warning("Comptage des pages impossible pour %s: %s", path.name, e)
            return 0

    def exists(self, file_name: str) -> bool:
        return self._path_for(file_name).is_file()

    def read_base64(self, file_name: str) -> Optional[str]:
        path = self._path_for(file_name)
        if not path.is_file():
            return None
        return base64.b64encode(path.read_bytes()).decode("ascii")

    def delete(self, file_name: str) -> bool:
        """
        Suppression best-effort : un fichier absent n'est pas une erreur.
        """
        path = self._path_for(file_name)
        if not path.is_file():
            logger.warning("Fichier %s déjà absent du stockage", path.name)
            return False
        path.unlink()
        return True
