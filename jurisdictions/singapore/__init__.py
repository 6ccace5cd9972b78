"""
JuriMap Singapore Module

PDPA with the PDPC, IMDA (GenAI and Agentic AI) and MAS governance
frameworks.
"""

from .module import SINGAPORE_LADDER, SingaporeModule

__all__ = ["SingaporeModule", "SINGAPORE_LADDER"]
