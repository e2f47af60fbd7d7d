import os
import copy
import json
import logging
from typing import List, Dict, Optional

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Lesen oder Schreiben der Produktdatei ist fehlgeschlagen (nur im strict-Modus)."""


# --------------------------------
# Schnittstelle
# --------------------------------
class ProductStore:
    """
    Lädt und speichert die komplette Produktliste.

    Jeder Request lädt die Liste neu und schreibt sie bei Änderungen
    vollständig zurück. Es gibt kein Locking: parallele Schreibzugriffe
    können sich gegenseitig überschreiben (last write wins).
    """

    def load(self) -> List[Dict]:
        raise NotImplementedError

    def save(self, products: List[Dict]):
        raise NotImplementedError


# --------------------------------
# JSON-Datei
# --------------------------------
class JsonFileProductStore(ProductStore):
    def __init__(self, path: str, best_effort: bool = True):
        self.path = path
        self.best_effort = best_effort

    def _ensure_file(self):
        if not os.path.exists(self.path):
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write("[]")

    def load(self) -> List[Dict]:
        try:
            self._ensure_file()
            with open(self.path, encoding="utf-8") as f:
                data = f.read()
            products = json.loads(data.strip() or "[]")
            if not isinstance(products, list):
                raise ValueError(f"JSON-Array erwartet, {type(products).__name__} gefunden")
            if not all(isinstance(p, dict) for p in products):
                raise ValueError("Produktliste enthält Einträge, die keine Objekte sind")
            return products
        except (OSError, ValueError) as e:
            logger.error(f"Fehler beim Lesen von {self.path}: {e}")
            if not self.best_effort:
                raise StorageError(str(e)) from e
            return []

    def save(self, products: List[Dict]):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(products, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Fehler beim Schreiben von {self.path}: {e}")
            if not self.best_effort:
                raise StorageError(str(e)) from e


# --------------------------------
# In-Memory (Tests)
# --------------------------------
class MemoryProductStore(ProductStore):
    def __init__(self, products: Optional[List[Dict]] = None):
        self.products = copy.deepcopy(products) if products else []

    def load(self) -> List[Dict]:
        return copy.deepcopy(self.products)

    def save(self, products: List[Dict]):
        self.products = copy.deepcopy(products)
