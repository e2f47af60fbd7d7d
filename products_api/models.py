import re
import math

UPDATABLE_FIELDS = ("name", "price", "inStock")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# --------------------------------
# Validierung
# --------------------------------
def is_number(value):
    # NaN/Infinity würden ungültiges JSON erzeugen
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_new_product(data):
    if not isinstance(data, dict):
        return False
    return bool(data.get("name")) and is_number(data.get("price")) and isinstance(data.get("inStock"), bool)


# --------------------------------
# IDs
# --------------------------------
def next_product_id(products):
    """
    Neue ID = ID des letzten Elements + 1, bei leerer Liste 1.

    Achtung: nicht die höchste ID. Nach dem Löschen des letzten Eintrags
    kann eine ID erneut vergeben werden.
    """
    if not products:
        return 1
    last_id = products[-1].get("id")
    if not is_number(last_id):
        last_id = 0
    return last_id + 1


def parse_product_id(raw):
    # "12abc" -> 12, "abc" -> None
    match = _LEADING_INT.match(raw or "")
    if not match:
        return None
    return int(match.group(1))


def find_product_index(products, product_id):
    if product_id is None:
        return -1
    return next((i for i, p in enumerate(products) if is_number(p.get("id")) and p["id"] == product_id), -1)


# --------------------------------
# Aufbau / Update
# --------------------------------
def build_product(product_id, data):
    return {
        "id": product_id,
        "name": data["name"],
        "price": data["price"],
        "inStock": data["inStock"]
    }


def apply_update(product, data):
    # auch falsy Werte (0, False, "", None) werden übernommen, solange der Key gesetzt ist
    if not isinstance(data, dict):
        return product
    for field in UPDATABLE_FIELDS:
        if field in data:
            product[field] = data[field]
    return product
