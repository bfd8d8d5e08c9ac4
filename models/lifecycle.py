# models/lifecycle.py

import enum

from extensions import db

class LifecycleState(enum.Enum):
    ACTIVE   = "active"
    DISABLED = "disabled"

class SoftDeleteMixin:
    """
    Catalog rows are never hard-deleted once something points at them;
    they are disabled instead and come back through ``reactivate()``.
    The state is persisted as the ``active`` boolean column.
    """
    active = db.Column(db.Boolean, nullable=False, default=True)

    @property
    def state(self) -> LifecycleState:
        return LifecycleState.ACTIVE if self.active else LifecycleState.DISABLED

    @property
    def is_active(self) -> bool:
        return self.state is LifecycleState.ACTIVE

    def disable(self):
        self.active = False

    def reactivate(self):
        self.active = True
