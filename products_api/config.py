import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

BEST_EFFORT = "best-effort"
STRICT = "strict"
PERSISTENCE_MODES = (BEST_EFFORT, STRICT)


class Config:
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3000))
    PRODUCTS_FILE = os.getenv("PRODUCTS_FILE", os.path.join(basedir, "products.json"))
    # best-effort: Lese-/Schreibfehler werden geloggt und verschluckt
    # strict: Fehler werden als HTTP 500 gemeldet
    PERSISTENCE_MODE = os.getenv("PERSISTENCE_MODE", BEST_EFFORT)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
