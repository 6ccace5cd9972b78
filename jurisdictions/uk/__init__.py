"""
JuriMap UK Module

UK GDPR and regulator guidance (ICO, AISI, DSIT, FCA, PRA).
"""

from .module import UK_LADDER, UkModule

__all__ = ["UkModule", "UK_LADDER"]
