"""
Utility helpers shared across the facetchannels package.
"""

from .retry import (
    RetryConfig,
    retry_with_backoff,
    retry_on_request_failure
)

__all__ = [
    'RetryConfig',
    'retry_with_backoff',
    'retry_on_request_failure'
]
