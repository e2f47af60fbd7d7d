import logging
from ..models import (
    is_valid_new_product, next_product_id, parse_product_id,
    find_product_index, build_product, apply_update
)

logger = logging.getLogger(__name__)


class InvalidProduct(Exception):
    pass


class ProductNotFound(Exception):
    pass


# --------------------------------
# Produkte abrufen
# --------------------------------
def list_products(store):
    return store.load()


def list_in_stock(store):
    return [p for p in store.load() if p.get("inStock") is True]


# --------------------------------
# Neues Produkt
# --------------------------------
def create_product(store, data):
    if not is_valid_new_product(data):
        raise InvalidProduct()

    products = store.load()
    product = build_product(next_product_id(products), data)

    products.append(product)
    store.save(products)
    logger.info(f"Produkt {product['id']} angelegt")
    return product


# --------------------------------
# Produkt aktualisieren
# --------------------------------
def update_product(store, raw_id, data):
    products = store.load()
    index = find_product_index(products, parse_product_id(raw_id))

    if index == -1:
        raise ProductNotFound(raw_id)

    apply_update(products[index], data)
    store.save(products)
    logger.info(f"Produkt {products[index].get('id')} aktualisiert")
    return products[index]


# --------------------------------
# Produkt löschen
# --------------------------------
def delete_product(store, raw_id):
    products = store.load()
    index = find_product_index(products, parse_product_id(raw_id))

    if index == -1:
        raise ProductNotFound(raw_id)

    removed = products.pop(index)
    store.save(products)
    logger.info(f"Produkt {removed.get('id')} gelöscht")
    return removed
