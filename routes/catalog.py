# routes/catalog.py
# ════════════════════════════════════════════════════════════════════════════
#  Device types, brands and repairs share one registry behaviour:
#  ▸ GET    /api/<kind>          – all rows, active or not
#  ▸ POST   /api/<kind>          – create (or reactivate) by name
#  ▸ PUT    /api/<kind>/<id>     – rename
#  ▸ DELETE /api/<kind>/<id>     – delete, or disable while in use
# ════════════════════════════════════════════════════════════════════════════
from flask import Blueprint, jsonify, request

from controllers import catalog


def _registry_blueprint(name, url_prefix, factory):
    bp = Blueprint(name, __name__, url_prefix=url_prefix)

    @bp.route("", methods=["GET"])
    def list_entries():
        return jsonify(factory().list())

    @bp.route("", methods=["POST"])
    def create_entry():
        data = request.get_json(silent=True) or {}
        return jsonify(success=True, **factory().create(data.get("name")))

    @bp.route("/<int:entry_id>", methods=["PUT", "DELETE"])
    def entry_item(entry_id):
        if request.method == "PUT":
            data = request.get_json(silent=True) or {}
            return jsonify(success=True, **factory().rename(entry_id, data.get("name")))
        return jsonify(success=True, **factory().delete(entry_id))      # DELETE

    return bp


device_types_bp = _registry_blueprint("device_types", "/api/device-types", catalog.device_types)
brands_bp       = _registry_blueprint("brands", "/api/brands", catalog.brands)
repairs_bp      = _registry_blueprint("repairs", "/api/repairs", catalog.repairs)
