"""Logging configuration for the plugin."""

import logging
import sys
from typing import Optional

import structlog


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    format_string: Optional[str] = None
) -> structlog.stdlib.BoundLogger:
    """
    Set up stdlib and structlog logging for the plugin.
    
    Log records go to stderr: stdout is reserved for the handshake line the
    orchestrator reads at startup.
    """
    
    if format_string is None:
        format_string = '%(message)s'
    
    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )
    
    # Keep the transport quiet unless something is wrong
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    
    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    logger = structlog.get_logger("gaia_sdk")
    logger.debug("Logging configured", level=level, format=log_format)
    return logger
