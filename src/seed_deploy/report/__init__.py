from __future__ import annotations

from .formatter import format_summary_table
from .publisher import publish_summary
from .summary import NEXT_STEPS, DeploymentSummary

__all__ = [
    "DeploymentSummary",
    "NEXT_STEPS",
    "format_summary_table",
    "publish_summary",
]
