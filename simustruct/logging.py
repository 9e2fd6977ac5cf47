import logging
import logging.config

from simustruct.settings import get_settings

settings = get_settings()


logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)-8s %(name)-19s %(message)s"},
            "raw": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "level": logging.INFO,
                "formatter": "raw",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
            "file": {
                "level": logging.DEBUG,
                "formatter": "standard",
                "class": "logging.FileHandler",
                "filename": str(settings.log_filename),
                "mode": "a",
            },
        },
        "loggers": {
            "": {
                "handlers": ["file"] if settings.test else ["default", "file"],
                "level": logging.DEBUG if settings.debug else logging.INFO,
                "propagate": False,
            },
        },
    }
)
