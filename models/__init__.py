# models/__init__.py

from .lifecycle import LifecycleState
from .device_type import DeviceType
from .brand import Brand
from .repair import Repair
from .device_model import DeviceModel
from .price_list import PriceListEntry
from .fixpoint import Fixpoint
from .user import User
from .quote import Quote, QuoteRepairLine, QuoteStatus

# For migrations or Flask shell usage
__all__ = [
    "LifecycleState",
    "DeviceType",
    "Brand",
    "Repair",
    "DeviceModel",
    "PriceListEntry",
    "Fixpoint",
    "User",
    "Quote",
    "QuoteRepairLine",
    "QuoteStatus",
]
