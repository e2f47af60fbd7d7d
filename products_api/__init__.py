import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config, PERSISTENCE_MODES, BEST_EFFORT
from .services.storage import JsonFileProductStore, StorageError
from .routes.products import products_bp

logger = logging.getLogger(__name__)


def create_app(config=None, store=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    mode = app.config["PERSISTENCE_MODE"]
    if mode not in PERSISTENCE_MODES:
        raise ValueError(f"Unbekannter PERSISTENCE_MODE: {mode}")

    # Felder in der Reihenfolge id, name, price, inStock ausgeben
    app.json.sort_keys = False

    if store is None:
        store = JsonFileProductStore(app.config["PRODUCTS_FILE"], best_effort=(mode == BEST_EFFORT))
    app.extensions["product_store"] = store

    app.register_blueprint(products_bp)
    register_error_handlers(app)
    return app


# --------------------------------
# Fehlerbehandlung
# --------------------------------
def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def http_fehler(e):
        return jsonify({"error": e.name}), e.code

    @app.errorhandler(StorageError)
    def speicher_fehler(e):
        logger.error(f"Speicherfehler: {e}")
        return jsonify({"error": "Storage error"}), 500

    @app.errorhandler(Exception)
    def unbekannter_fehler(e):
        logger.exception("Unerwarteter Fehler")
        return jsonify({"error": "Internal server error"}), 500
