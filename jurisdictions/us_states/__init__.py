"""
JuriMap US State Modules

California, Colorado, Illinois, New York City and Texas AI and privacy laws.
"""

from .california import CALIFORNIA_LADDER, CaliforniaModule
from .colorado import COLORADO_LADDER, ColoradoModule
from .common import is_automated, is_automated_consumer_decision, is_employment_decision
from .illinois import ILLINOIS_LADDER, IllinoisModule
from .new_york import NEW_YORK_LADDER, NewYorkModule, is_aedt
from .texas import TEXAS_LADDER, TexasModule

__all__ = [
    "CaliforniaModule",
    "ColoradoModule",
    "IllinoisModule",
    "NewYorkModule",
    "TexasModule",
    "CALIFORNIA_LADDER",
    "COLORADO_LADDER",
    "ILLINOIS_LADDER",
    "NEW_YORK_LADDER",
    "TEXAS_LADDER",
    "is_aedt",
    "is_automated",
    "is_automated_consumer_decision",
    "is_employment_decision",
]
