# routes/price_list.py

from flask import Blueprint, jsonify, request

from controllers.price_list import PriceList

price_list_bp = Blueprint("price_list", __name__, url_prefix="/api/model-repairs")

# ── PRICES OF ONE MODEL ───────────────────────────────────────────────
@price_list_bp.route("", methods=["GET"])
def list_prices():
    return jsonify(PriceList().list(request.args.get("model_id")))

# ── CREATE OR UPDATE ──────────────────────────────────────────────────
@price_list_bp.route("", methods=["POST"])
def upsert_price():
    data = request.get_json(silent=True) or {}
    result = PriceList().upsert(
        data.get("model_id"), data.get("repair_id"), data.get("price")
    )
    return jsonify(success=True, **result)

@price_list_bp.route("/<int:entry_id>", methods=["DELETE"])
def delete_price(entry_id):
    return jsonify(success=True, **PriceList().delete(entry_id))
