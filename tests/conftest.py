import pytest

from products_api import create_app
from products_api.services.storage import MemoryProductStore


@pytest.fixture
def products_file(tmp_path):
    return tmp_path / "products.json"


@pytest.fixture
def app(products_file):
    return create_app({"TESTING": True, "PRODUCTS_FILE": str(products_file)})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def memory_store():
    return MemoryProductStore()


@pytest.fixture
def memory_client(memory_store):
    return create_app({"TESTING": True}, store=memory_store).test_client()
