"""
Floodlux Compliance Module

Standards compliance checking for outdoor lighting designs.
"""

from floodlux.compliance.checker import UNKNOWN_STANDARD, ComplianceResult, check_compliance

__all__ = ["UNKNOWN_STANDARD", "ComplianceResult", "check_compliance"]
