# routes/device_models.py

from flask import Blueprint, jsonify, request

from controllers.device_model import ModelCatalog

models_bp = Blueprint("models", __name__, url_prefix="/api/models")

# ── MODELS FOR <select> (needs device_type_id & brand_id) ─────────────
@models_bp.route("", methods=["GET"])
def list_models():
    return jsonify(ModelCatalog().list(
        request.args.get("device_type_id"),
        request.args.get("brand_id"),
    ))

# ── CREATE MODEL ──────────────────────────────────────────────────────
@models_bp.route("", methods=["POST"])
def add_model():
    data = request.get_json(silent=True) or {}
    result = ModelCatalog().create(
        data.get("name"), data.get("device_type_id"), data.get("brand_id")
    )
    return jsonify(success=True, **result)

# ── RENAME / DELETE ───────────────────────────────────────────────────
@models_bp.route("/<int:model_id>", methods=["PUT", "DELETE"])
def model_item(model_id):
    if request.method == "PUT":
        data = request.get_json(silent=True) or {}
        return jsonify(success=True, **ModelCatalog().rename(model_id, data.get("name")))
    return jsonify(success=True, **ModelCatalog().delete(model_id))
