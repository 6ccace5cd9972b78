from .module import US_FEDERAL_LADDER, UsFederalModule, is_credit_scoring_ai

__all__ = ["UsFederalModule", "US_FEDERAL_LADDER", "is_credit_scoring_ai"]
