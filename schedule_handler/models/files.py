from pydantic import BaseModel, Field


class StoredFile(BaseModel):
    fileName: str = Field(..., description="Nom généré sur disque (<uuid>.<ext>)")
    originalName: str = Field(..., description="Nom du fichier côté client")
    size: int = Field(..., ge=0, description="Taille en octets")
    pages: int = Field(0, ge=0, description="Nombre de pages détectées")


class UploadResponse(StoredFile):
    success: bool = True


class DownloadResponse(BaseModel):
    fileName: str
    data: str = Field(..., description="Contenu du PDF encodé en base64")
    mimeType: str = "application/pdf"


class DeleteResponse(BaseModel):
    success: bool = True
