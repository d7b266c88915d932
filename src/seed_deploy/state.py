"""Application state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .settings import DeploySettings


@dataclass
class AppState:
    """Container for run-wide settings and dependencies.

    Passed through the pipeline to avoid global state and enable testing.
    ``config_source`` overrides the process environment as the source of
    deployment parameters.
    """

    settings: DeploySettings
    logger: logging.Logger
    config_source: Optional[Mapping[str, str]] = None
