"""
Shared handler plumbing.

- utils.observability: Powertools Logger, Tracer and Metrics instances
- models.env_vars: typed environment configuration
"""

from awpaki.handlers.utils.observability import logger, metrics, tracer

__all__ = ["logger", "tracer", "metrics"]
