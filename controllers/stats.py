# controllers/stats.py

from sqlalchemy import case, func

from controllers.transaction import SessionBound, atomic
from models.quote import Quote, QuoteStatus


def _count_status(status: QuoteStatus):
    return func.coalesce(func.sum(case((Quote.status == status.value, 1), else_=0)), 0)


class StatsAggregator(SessionBound):
    """Read-only rollup over every quote, fed to the stats report."""

    def overview(self) -> dict:
        with atomic(self.session, "stats overview", commit=False):
            total, new_count, assigned_count, done_count, total_amount = (
                self.session.query(
                    func.count(Quote.id),
                    _count_status(QuoteStatus.NEW),
                    _count_status(QuoteStatus.ASSIGNED),
                    _count_status(QuoteStatus.DONE),
                    func.coalesce(func.sum(Quote.price), 0),
                ).one()
            )
        return {
            "total":          int(total),
            "new_count":      int(new_count),
            "assigned_count": int(assigned_count),
            "done_count":     int(done_count),
            "total_amount":   float(total_amount),
        }
