import logging.config

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'clean': {
            'format': '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'clean',
        }
    },
    'loggers': {
        # grpc's own logger is chatty at INFO during shutdown
        'grpc': {
            'level': 'WARNING',
        },
        'httpx': {
            'level': 'WARNING',
        },
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    }
}


def setup_logging(level: str = "INFO"):
    config = dict(LOGGING_CONFIG)
    config['root'] = dict(LOGGING_CONFIG['root'], level=level.upper())
    logging.config.dictConfig(config)
