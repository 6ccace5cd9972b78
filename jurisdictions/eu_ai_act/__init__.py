"""
JuriMap EU AI Act Module

Risk tiers under Regulation (EU) 2024/1689 plus GPAI model obligations.
"""

from .gpai import classify_gpai, is_gpai_applicable
from .module import EU_AI_ACT_LADDER, EuAiActModule

__all__ = ["EuAiActModule", "EU_AI_ACT_LADDER", "classify_gpai", "is_gpai_applicable"]
