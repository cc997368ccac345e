"""Structured JSON logging for the HealthHub Lambda services."""

import logging
import os
import sys

import structlog


def add_lambda_context(service_name: str, environment: str):
    """
    Builds a processor that stamps every event with the service name, the
    deployment stage and the Lambda request/trace ids (read per event, since
    Lambda sets them per invocation).
    """

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("environment", environment)
        event_dict.setdefault("request_id", os.environ.get("AWS_REQUEST_ID", "local"))
        trace_id = os.environ.get("_X_AMZN_TRACE_ID")
        if trace_id:
            event_dict.setdefault("trace_id", trace_id)
        return event_dict

    return processor


def configure_logging(service_name: str, environment: str = "dev", level: str = "INFO") -> None:
    """Configure stdlib logging and structlog to emit one JSON object per line."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    # Lambda pre-installs a handler on the root logger, so basicConfig alone is a no-op there
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_lambda_context(service_name, environment),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
