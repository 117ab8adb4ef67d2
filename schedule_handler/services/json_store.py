from __future__ import annotations

import fcntl
import json
import logging
from pathlib import Path
from typing import Callable, List, TypeVar

from schedule_handler.core.errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonStore:
    """
    Table "à plat" : un fichier JSON contenant un tableau d'objets.

    Pas d'index ni de requêtes : chaque lecture charge tout le fichier,
    chaque écriture le réécrit entièrement (via un .tmp puis replace).
    Les écritures passent par `transaction()` qui prend un flock exclusif
    sur `<fichier>.lock` le temps du read-modify-write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def ensure(self) -> bool:
        """Crée le dossier parent et un tableau vide si besoin. True si créé."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            return False
        self.save([])
        return True

    def load(self) -> List[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Lecture impossible de %s: %s", self.path, e)
            raise StoreError(f"Store illisible : {self.path.name}") from e
        if not isinstance(data, list):
            raise StoreError(f"Store invalide : {self.path.name} doit contenir un tableau JSON")
        return data

    def save(self, records: List[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        tmp.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)  # atomic on POSIX

    def transaction(self, fn: Callable[[List[dict]], T]) -> T:
        """
        Exécute fn(records) sous verrou exclusif et retourne sa valeur.
        fn est responsable d'appeler save() s'il modifie les records.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lock_file = self.path.with_suffix(".lock")
        with open(lock_file, "a") as lf:
            fcntl.flock(lf, fcntl.LOCK_EX)
            try:
                return fn(self.load())
            finally:
                fcntl.flock(lf, fcntl.LOCK_UN)

    def find(self, record_id: str) -> dict | None:
        return next((r for r in self.load() if r.get("id") == record_id), None)
