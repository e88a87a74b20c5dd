"""Retry logic utilities."""

import asyncio
from dataclasses import dataclass
from typing import Callable, Any, Tuple, Type

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class RetryConfig:
    """Retry configuration."""
    max_attempts: int = 3
    base_delay: float = 0.5
    max_delay: float = 5.0
    exponential_base: float = 2.0


class RetryHandler:
    """Handles retry logic with exponential backoff."""
    
    def __init__(self, config: RetryConfig, retry_on: Tuple[Type[BaseException], ...] = (Exception,)):
        self.config = config
        self.retry_on = retry_on
    
    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay for given attempt number."""
        delay = self.config.base_delay * (self.config.exponential_base ** (attempt - 1))
        return min(delay, self.config.max_delay)
    
    async def execute_with_retry(
        self, 
        operation: Callable,
        operation_name: str = "operation",
        *args,
        **kwargs
    ) -> Any:
        """Execute an async operation, retrying matching failures."""
        for attempt in range(1, self.config.max_attempts + 1):
            try:
                result = await operation(*args, **kwargs)
                
                if attempt > 1:
                    logger.info("Operation succeeded after retry", operation=operation_name, attempt=attempt)
                
                return result
                
            except self.retry_on as e:
                if attempt >= self.config.max_attempts:
                    logger.error("Operation failed", operation=operation_name, attempts=attempt, error=str(e))
                    raise
                
                delay = self.calculate_delay(attempt)
                logger.warning(
                    "Operation failed, retrying",
                    operation=operation_name, attempt=attempt, delay=delay, error=str(e)
                )
                await asyncio.sleep(delay)
