from flask import Blueprint, request, jsonify, current_app
from ..services.products import (
    list_products, list_in_stock, create_product, update_product, delete_product,
    InvalidProduct, ProductNotFound
)

products_bp = Blueprint("products", __name__)


def get_store():
    return current_app.extensions["product_store"]


def get_body():
    # kaputtes JSON -> BadRequest (400), fehlender Body -> {}
    if request.is_json and request.get_data():
        return request.get_json()
    return {}


# ----------------------------
# Alle Produkte
# ----------------------------
@products_bp.route("/products", methods=["GET"])
def alle_produkte():
    return jsonify(list_products(get_store()))


# ----------------------------
# Nur Produkte auf Lager
# ----------------------------
@products_bp.route("/products/instock", methods=["GET"])
def produkte_auf_lager():
    return jsonify(list_in_stock(get_store()))


# ----------------------------
# Neues Produkt
# ----------------------------
@products_bp.route("/products", methods=["POST"])
def neues_produkt():
    try:
        product = create_product(get_store(), get_body())
    except InvalidProduct:
        return jsonify({"error": "Invalid input format"}), 400
    return jsonify(product), 201


# ----------------------------
# Produkt aktualisieren
# ----------------------------
@products_bp.route("/products/<product_id>", methods=["PUT"])
def produkt_aktualisieren(product_id):
    try:
        product = update_product(get_store(), product_id, get_body())
    except ProductNotFound:
        return jsonify({"error": "Product not found"}), 404
    return jsonify(product)


# ----------------------------
# Produkt löschen
# ----------------------------
@products_bp.route("/products/<product_id>", methods=["DELETE"])
def produkt_loeschen(product_id):
    try:
        removed = delete_product(get_store(), product_id)
    except ProductNotFound:
        return jsonify({"error": "Product not found"}), 404
    return jsonify({"message": f"Product with id {product_id} deleted successfully", "deleted": removed})
