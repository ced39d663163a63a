"""
Logfire observability configuration for AdMachin.

Traces bulk ad commits and pydantic validation of library records.

Usage:
    from admachin.core.observability import setup_logfire
    setup_logfire()

Environment Variables:
    LOGFIRE_TOKEN: Logfire write token (nothing is sent without it)
    LOGFIRE_PROJECT_NAME: Project name in Logfire dashboard
    LOGFIRE_ENVIRONMENT: Environment name (development, staging, production)
"""

import os
import logging
from typing import Optional

import logfire

logger = logging.getLogger(__name__)

_logfire_configured = False


def setup_logfire(
    project_name: Optional[str] = None,
    environment: Optional[str] = None,
    service_name: str = "admachin",
    level: int = logging.INFO,
) -> bool:
    """
    Configure Logfire for observability.

    Without a token Logfire is still configured, locally only, so spans
    such as the bulk commit span are recorded nowhere and raise no warnings.

    Args:
        project_name: Logfire project name (or LOGFIRE_PROJECT_NAME env var)
        environment: Environment name (or LOGFIRE_ENVIRONMENT env var)
        service_name: Service name for tracing
        level: Root log level once stdlib logging is routed through Logfire

    Returns:
        True if Logfire was configured to send data, False otherwise
    """
    global _logfire_configured

    if _logfire_configured:
        logger.debug("Logfire already configured")
        return True

    token = os.environ.get("LOGFIRE_TOKEN")
    if not token:
        logger.info("LOGFIRE_TOKEN not set, Logfire stays local")
        logfire.configure(service_name=service_name, send_to_logfire=False, console=False)
        return False

    project = project_name or os.environ.get("LOGFIRE_PROJECT_NAME", "admachin")
    env = environment or os.environ.get("LOGFIRE_ENVIRONMENT", "development")

    try:
        logfire.configure(
            token=token,
            project_name=project,
            service_name=service_name,
            environment=env,
            send_to_logfire=True,
            console=False,
        )
        logfire.instrument_pydantic()
    except Exception as e:
        logger.error(f"Failed to configure Logfire: {e}")
        return False

    # Route stdlib logging through logfire as well
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler(), logging.StreamHandler()],
        force=True,
    )

    _logfire_configured = True
    logger.info(f"Logfire configured: project={project}, environment={env}")
    return True
