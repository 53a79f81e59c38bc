"""Inspection subsystem contract.

Inspection re-evaluates whether a cargo is still on track once new handling
data arrives. Only the contract lives here; implementations are supplied by
the deployment.
"""

from tallyman.inspection.protocol import InspectionService

__all__ = ["InspectionService"]
