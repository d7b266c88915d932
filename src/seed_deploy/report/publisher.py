from __future__ import annotations

import json
import logging

from ..settings import DeploySettings, OutputFormat
from .formatter import format_summary_table
from .summary import NEXT_STEPS, DeploymentSummary

logger = logging.getLogger(__name__)


def publish_summary(settings: DeploySettings, summary: DeploymentSummary) -> None:
    """Print the summary to stdout and optionally record it to a JSON file.

    Args:
        settings: Run settings (output format and summary file)
        summary: The completed deployment summary
    """
    data = {**summary.to_dict(), "next_steps": list(NEXT_STEPS)}

    if settings.output_format == OutputFormat.JSON:
        print(json.dumps(data, indent=2))
    else:
        format_summary_table(summary)

    if settings.summary_file is not None:
        settings.summary_file.parent.mkdir(parents=True, exist_ok=True)
        settings.summary_file.write_text(json.dumps(data, indent=2) + "\n")
        logger.info("Deployment summary written to %s", settings.summary_file)
