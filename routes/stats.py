# routes/stats.py

from flask import Blueprint, Response, jsonify

from controllers.reports import render_stats_pdf
from controllers.stats import StatsAggregator

stats_bp = Blueprint("stats", __name__, url_prefix="/api/stats")

@stats_bp.route("/overview")
def overview():
    return jsonify(StatsAggregator().overview())

@stats_bp.route("/overview/pdf")
def overview_pdf():
    return Response(
        render_stats_pdf(StatsAggregator().overview()),
        mimetype="application/pdf",
        headers={"Content-Disposition": "attachment; filename=statistiche_fixpoint.pdf"},
    )
