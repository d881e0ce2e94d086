"""
Shared AWS Lambda Powertools instances.

Every awpaki module logs, traces and emits metrics through these objects, so a
handler decorated with ``logger.inject_lambda_context`` or ``metrics.log_metrics``
gets the toolkit output with the same service name and correlation id.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

from awpaki.handlers.models.env_vars import get_toolkit_env_vars

METRICS_NAMESPACE = 'Awpaki'

_env_vars = get_toolkit_env_vars()

# JSON output, level from LOG_LEVEL
logger: Logger = Logger(service=_env_vars.POWERTOOLS_SERVICE_NAME, level=_env_vars.LOG_LEVEL.upper())

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "True", and outside Lambda
tracer: Tracer = Tracer(service=_env_vars.POWERTOOLS_SERVICE_NAME)

metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE, service=_env_vars.POWERTOOLS_SERVICE_NAME)
