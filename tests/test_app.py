import logging

import pytest

from products_api import create_app
from products_api.services.storage import JsonFileProductStore, ProductStore


class BrokenStore(ProductStore):
    def load(self):
        raise RuntimeError("kaputt")

    def save(self, products):
        pass


def test_default_store_uses_configured_file(app, products_file):
    store = app.extensions["product_store"]
    assert isinstance(store, JsonFileProductStore)
    assert store.path == str(products_file)
    assert store.best_effort is True


def test_unknown_persistence_mode():
    with pytest.raises(ValueError):
        create_app({"PERSISTENCE_MODE": "sometimes"})


def test_unknown_route_is_json(client):
    res = client.get("/nothing-here")
    assert res.status_code == 404
    assert res.get_json() == {"error": "Not Found"}


def test_wrong_method_is_json(client):
    res = client.patch("/products")
    assert res.status_code == 405
    assert res.get_json() == {"error": "Method Not Allowed"}


def test_unexpected_error_hides_details():
    client = create_app({"TESTING": False}, store=BrokenStore()).test_client()
    res = client.get("/products")
    assert res.status_code == 500
    assert res.get_json() == {"error": "Internal server error"}


# ============================================================
# Schreibfehler: best-effort vs. strict
# ============================================================

def test_best_effort_write_failure_still_succeeds(tmp_path):
    # Verzeichnis statt Datei -> Lesen und Schreiben schlagen fehl
    client = create_app({"TESTING": True, "PRODUCTS_FILE": str(tmp_path)}).test_client()
    res = client.post("/products", json={"name": "Pen", "price": 1.5, "inStock": True})
    assert res.status_code == 201
    assert res.get_json()["id"] == 1
    assert client.get("/products").get_json() == []


def test_strict_write_failure_is_500(tmp_path):
    client = create_app({
        "TESTING": True,
        "PRODUCTS_FILE": str(tmp_path),
        "PERSISTENCE_MODE": "strict",
    }).test_client()
    res = client.get("/products")
    assert res.status_code == 500
    assert res.get_json() == {"error": "Storage error"}


# ============================================================
# Startmeldung
# ============================================================

def test_main_logs_startup_and_runs(monkeypatch, caplog):
    import app as entry

    calls = []
    monkeypatch.setitem(entry.app.config, "HOST", "127.0.0.1")
    monkeypatch.setitem(entry.app.config, "PORT", 4321)
    monkeypatch.setattr(entry.app, "run", lambda **kwargs: calls.append(kwargs))

    with caplog.at_level(logging.INFO, logger="app"):
        entry.main()

    assert "Server running on http://localhost:4321" in caplog.text
    assert calls == [{"host": "127.0.0.1", "port": 4321, "threaded": True}]
