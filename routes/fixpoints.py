# routes/fixpoints.py

from flask import Blueprint, jsonify, request

from controllers.fixpoint import FixpointRegistry

fixpoints_bp = Blueprint("fixpoints", __name__, url_prefix="/api/fixpoints")

_FIELDS = ("name", "city", "address", "phone", "email")


def _payload():
    data = request.get_json(silent=True) or {}
    return {f: data.get(f) for f in _FIELDS}


@fixpoints_bp.route("", methods=["GET"])
def list_fixpoints():
    return jsonify(FixpointRegistry().list())


@fixpoints_bp.route("", methods=["POST"])
def add_fixpoint():
    return jsonify(success=True, **FixpointRegistry().create(**_payload()))


@fixpoints_bp.route("/<int:fixpoint_id>", methods=["GET", "PUT", "DELETE"])
def fixpoint_item(fixpoint_id):
    if request.method == "GET":
        return jsonify(FixpointRegistry().get(fixpoint_id))
    if request.method == "PUT":
        return jsonify(success=True, **FixpointRegistry().update(fixpoint_id, **_payload()))
    return jsonify(success=True, **FixpointRegistry().delete(fixpoint_id))     # DELETE
