from .module import CHINA_LADDER, ChinaModule, requires_algorithm_filing

__all__ = ["ChinaModule", "CHINA_LADDER", "requires_algorithm_filing"]
