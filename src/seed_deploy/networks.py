from __future__ import annotations

from typing import Optional

from .constants import NETWORK_DEFAULTS, NetworkDefaultBundle
from .logger import get_logger

logger = get_logger(__name__)


def lookup_network_defaults(chain_id: int) -> Optional[NetworkDefaultBundle]:
    """Return the default address bundle for ``chain_id``.

    Unknown chains are not an error: a warning is logged and ``None`` is
    returned, so every address has to come from configuration.
    """
    bundle = NETWORK_DEFAULTS.get(chain_id)
    if bundle is None:
        logger.warning(
            "Unknown chain id %d, using configuration values only (no defaults)",
            chain_id,
        )
    return bundle
