from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timezone
from typing import List, Optional

from schedule_handler.core.errors import NotFoundError, ValidationError
from schedule_handler.models.files import DownloadResponse
from schedule_handler.models.sessions import (
    SessionStats,
    SessionStatus,
    parse_requested_date,
)
from schedule_handler.services.json_store import JsonStore
from schedule_handler.services.storage import PDF_MIME_TYPE, StorageService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "title",
    "userId",
    "userName",
    "userEmail",
    "pdfPath",
    "originalFileName",
    "requestedDate",
    "requestedTime",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SessionService:
    """
    Cycle de vie des demandes de session : pending -> approved | rejected.

    Le store n'impose pas l'ordre des transitions, n'importe lequel des
    trois statuts peut être écrit.
    """

    def __init__(self, store: JsonStore, storage: StorageService):
        self.store = store
        self.storage = storage
        self.store.ensure()

    # ------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------
    def list_all(self) -> List[dict]:
        return self.store.load()

    def list_by_user(self, user_id: str) -> List[dict]:
        return [s for s in self.store.load() if s.get("userId") == user_id]

    def get(self, session_id: str) -> dict:
        session = self.store.find(session_id)
        if not session:
            raise NotFoundError("Session not found")
        return session

    # ------------------------------------------------------------
    # Ecriture
    # ------------------------------------------------------------
    def create(self, fields: dict) -> dict:
        missing = [k for k in REQUIRED_FIELDS if not fields.get(k)]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        now = _now()
        new_session = {
            "id": str(uuid.uuid4()),
            "title": fields["title"],
            "description": fields.get("description") or "",
            "userId": fields["userId"],
            "userName": fields["userName"],
            "userEmail": fields["userEmail"],
            "pdfPath": fields["pdfPath"],
            "originalFileName": fields["originalFileName"],
            "fileSize": fields.get("fileSize"),
            "requestedDate": fields["requestedDate"],
            "requestedTime": fields["requestedTime"],
            "status": SessionStatus.pending.value,
            "adminNotes": None,
            "createdAt": now,
            "updatedAt": now,
        }

        def _insert(sessions: List[dict]) -> dict:
            sessions.append(new_session)
            self.store.save(sessions)
            return new_session

        created = self.store.transaction(_insert)
        logger.info("Demande %s créée pour l'utilisateur %s", created["id"], created["userId"])
        return created

    def set_status(self, session_id: str, status: str, admin_notes: Optional[str] = None) -> dict:
        """
        Met à jour le statut. Une note vide ou absente conserve la note existante.
        """
        try:
            new_status = SessionStatus(status)
        except ValueError:
            raise ValidationError("Invalid status")

        def _update(sessions: List[dict]) -> Optional[dict]:
            for s in sessions:
                if s.get("id") == session_id:
                    s["status"] = new_status.value
                    if admin_notes:
                        s["adminNotes"] = admin_notes
                    s["updatedAt"] = _now()
                    self.store.save(sessions)
                    return s
            return None

        updated = self.store.transaction(_update)
        if not updated:
            raise NotFoundError("Session not found")

        logger.info("Demande %s -> %s", session_id, new_status.value)
        return updated

    def delete(self, session_id: str) -> None:
        """
        Supprime la demande et son PDF (absence du fichier ignorée).
        """

        def _delete(sessions: List[dict]) -> Optional[dict]:
            for i, s in enumerate(sessions):
                if s.get("id") == session_id:
                    self.storage.delete(s.get("pdfPath") or "")
                    sessions.pop(i)
                    self.store.save(sessions)
                    return s
            return None

        removed = self.store.transaction(_delete)
        if not removed:
            raise NotFoundError("Session not found")

        logger.info("Demande %s supprimée", session_id)

    # ------------------------------------------------------------
    # Fichier
    # ------------------------------------------------------------
    def read_file(self, session_id: str) -> DownloadResponse:
        session = self.get(session_id)
        data = self.storage.read_base64(session.get("pdfPath") or "")
        if data is None:
            raise NotFoundError("File not found")
        return DownloadResponse(
            fileName=session.get("originalFileName") or "",
            data=data,
            mimeType=PDF_MIME_TYPE,
        )

    # ------------------------------------------------------------
    # Statistiques
    # ------------------------------------------------------------
    def stats(self, user_id: Optional[str] = None, today: Optional[date] = None) -> SessionStats:
        """
        Compteurs recalculés à chaque appel.

        `upcoming` = demandes approuvées dont la date demandée est >= à la
        date du jour. Comparaison sur la date calendaire uniquement : une
        session prévue aujourd'hui reste "à venir" toute la journée.
        """
        today = today or date.today()
        sessions = self.list_by_user(user_id) if user_id else self.list_all()

        stats = SessionStats(total=len(sessions))
        for s in sessions:
            status = s.get("status")
            if status == SessionStatus.pending.value:
                stats.pending += 1
            elif status == SessionStatus.rejected.value:
                stats.rejected += 1
            elif status == SessionStatus.approved.value:
                stats.approved += 1
                if self._requested_on_or_after(s, today):
                    stats.upcoming += 1
            else:
                logger.warning("Statut inconnu %r pour la demande %s", status, s.get("id"))
        return stats

    @staticmethod
    def _requested_on_or_after(session: dict, today: date) -> bool:
        try:
            return parse_requested_date(session.get("requestedDate")) >= today
        except ValueError:
            logger.warning("requestedDate illisible pour la demande %s", session.get("id"))
            return False
