# controllers/errors.py
# ════════════════════════════════════════════════════════════════════════════
#  Domain errors raised by the controllers. Each one carries the HTTP status
#  the routes answer with; app.py renders them as {"error": message}.
# ════════════════════════════════════════════════════════════════════════════

class FixpointError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(FixpointError):
    """Missing, empty or malformed input, or a reference to a missing row."""
    status_code = 400


class NotFoundError(FixpointError):
    status_code = 404


class ConflictError(FixpointError):
    """Duplicate entry, row still in use, or a refused status change."""
    status_code = 409


class StorageError(FixpointError):
    """The database failed; the surrounding transaction was rolled back."""
    status_code = 500
