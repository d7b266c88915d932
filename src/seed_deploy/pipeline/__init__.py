from __future__ import annotations

from .context import DeploymentContext
from .run import Stage, build_stages, run_deployment

__all__ = ["DeploymentContext", "Stage", "build_stages", "run_deployment"]
