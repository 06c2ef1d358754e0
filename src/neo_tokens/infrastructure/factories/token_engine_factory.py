"""Token engine factory."""

import logging
from typing import Optional

from ...application.engine import TokenEngine
from ...config.engine_config import EngineConfig
from ...config.settings import TokenSettings, get_token_settings
from ...core.protocols import Clock

logger = logging.getLogger(__name__)


def create_token_engine(
    settings: Optional[TokenSettings] = None,
    clock: Optional[Clock] = None,
) -> TokenEngine:
    """Create a token engine from settings.

    Args:
        settings: Token settings, defaults to the cached environment settings
        clock: Time source, defaults to the system clock

    Returns:
        Configured TokenEngine

    Raises:
        ConfigurationError: If the settings do not describe usable key material
    """
    settings = settings or get_token_settings()
    config = EngineConfig.from_settings(settings)
    engine = TokenEngine(config, clock=clock)

    logger.info(
        f"Token engine created: algorithm={config.algorithm.value} "
        f"required_claims={sorted(config.required_claims)} "
        f"clock_skew_seconds={config.clock_skew_seconds} "
        f"require_expiration={config.require_expiration}"
    )
    return engine
