"""
JuriMap EU GDPR Module

Personal data processing obligations, with DPIA triggers (Article 35) as the
high-risk rung.
"""

from .module import DPIA_TRIGGERS, EU_GDPR_LADDER, EuGdprModule

__all__ = ["EuGdprModule", "EU_GDPR_LADDER", "DPIA_TRIGGERS"]
