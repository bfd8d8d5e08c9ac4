# routes/quotes.py
# ════════════════════════════════════════════════════════════════════════════
#  Quotes
#  --------------------------------------------------------------------------
#  ▸ POST /api/quotes                 – create with repair_ids[]
#  ▸ GET  /api/quotes                 – every quote, newest first
#  ▸ GET  /api/quotes/<id>            – one quote
#  ▸ GET  /api/quotes/<id>/pdf        – the quote as a PDF document
#  ▸ PUT  /api/quotes/<id>/assign     – assign to a fixpoint
#  ▸ PUT  /api/quotes/<id>/status     – change status
#  ▸ GET  /api/fixpoint/quotes        – quotes of one fixpoint (?fixpoint_id=)
# ════════════════════════════════════════════════════════════════════════════
from flask import Blueprint, Response, jsonify, request

from controllers.quotes import QuoteEngine
from controllers.reports import render_quote_pdf

quotes_bp = Blueprint("quotes", __name__, url_prefix="/api")


@quotes_bp.route("/quotes", methods=["POST"])
def create_quote():
    data = request.get_json(silent=True) or {}
    quote_id = QuoteEngine().create(
        model_id=data.get("model_id"),
        repair_ids=data.get("repair_ids"),
        fixpoint_id=data.get("fixpoint_id"),
        price=data.get("price"),
        city=data.get("city"),
        customer_name=data.get("customer_name"),
        customer_email=data.get("customer_email"),
        status=data.get("status"),
    )
    return jsonify(success=True, quote_id=quote_id)


@quotes_bp.route("/quotes", methods=["GET"])
def list_quotes():
    return jsonify(QuoteEngine().list())


@quotes_bp.route("/quotes/<int:quote_id>", methods=["GET"])
def get_quote(quote_id):
    return jsonify(QuoteEngine().get(quote_id))


@quotes_bp.route("/quotes/<int:quote_id>/pdf", methods=["GET"])
def quote_pdf(quote_id):
    quote = QuoteEngine().get(quote_id)
    return Response(
        render_quote_pdf(quote),
        mimetype="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=preventivo_{quote_id}.pdf"},
    )


@quotes_bp.route("/quotes/<int:quote_id>/assign", methods=["PUT"])
def assign_quote(quote_id):
    data = request.get_json(silent=True) or {}
    return jsonify(success=True, **QuoteEngine().assign_fixpoint(quote_id, data.get("fixpoint_id")))


@quotes_bp.route("/quotes/<int:quote_id>/status", methods=["PUT"])
def quote_status(quote_id):
    data = request.get_json(silent=True) or {}
    return jsonify(success=True, **QuoteEngine().set_status(quote_id, data.get("status")))


@quotes_bp.route("/fixpoint/quotes", methods=["GET"])
def fixpoint_quotes():
    return jsonify(QuoteEngine().list_for_fixpoint(request.args.get("fixpoint_id")))
