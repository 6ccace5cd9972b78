from .module import BRAZIL_LADDER, BrazilModule, is_automated_decision_making

__all__ = ["BrazilModule", "BRAZIL_LADDER", "is_automated_decision_making"]
