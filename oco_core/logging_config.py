"""
Logging setup for processes embedding oco_core.

Library modules only create loggers; call configure_logging() once at start-up.
"""
import logging.config

from oco_core import config as settings


def build_logging_config(level=None, json_output=None):
    level = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.LOG_JSON

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '{levelname} {name} [{correlation_id}] {message}',
                'style': '{',
            },
            'json': {
                '()': 'pythonjsonlogger.jsonlogger.JsonFormatter',
                'format': '%(asctime)s %(name)s %(levelname)s %(message)s %(funcName)s %(correlation_id)s',
            },
        },
        'filters': {
            'correlation_id': {
                '()': 'oco_core.logging_filter.CorrelationIDFilter',
            },
        },
        'handlers': {
            'console': {
                'level': level,
                'class': 'logging.StreamHandler',
                'formatter': 'json' if json_output else 'simple',
                'filters': ['correlation_id'],
            },
        },
        'loggers': {
            'oco_core': {
                'handlers': ['console'],
                'level': level,
                'propagate': True,
            },
        },
    }


def configure_logging(level=None, json_output=None):
    """Apply the console logging config (JSON when OCO_LOG_JSON is set)."""
    logging.config.dictConfig(build_logging_config(level, json_output))
