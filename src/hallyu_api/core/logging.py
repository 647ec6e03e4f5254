import logging
from logging.config import dictConfig

from hallyu_api.core.config import settings

LOG_FORMAT = "%(asctime)s\t[%(levelname)s]\t%(name)s\t%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def buildLogConfig(logFile: str) -> dict:
	""" dictConfig for the api: requests go to stdout, data loading goes to
	stdout and the log file, everything else only to the log file
	"""
	return {
		"version": 1,
		"disable_existing_loggers": False,
		"formatters": {
			"default": {
				"format": LOG_FORMAT,
				"datefmt": DATE_FORMAT,
			},
		},
		"handlers": {
			"console": {
				"class": "logging.StreamHandler",
				"level": "DEBUG",
				"formatter": "default",
				"stream": "ext://sys.stdout",
			},
			"file": {
				"class": "logging.FileHandler",
				"level": "INFO",
				"formatter": "default",
				"filename": logFile,
				"mode": "a",
				# no file is created until something is logged
				"delay": True,
			},
		},
		"loggers": {
			"request": {"handlers": ["console"], "level": "INFO", "propagate": False},
			"data": {"handlers": ["console", "file"], "level": "INFO", "propagate": False},
			"crud": {"handlers": ["file"], "level": "INFO", "propagate": False},
		},
		"root": {"handlers": ["file"], "level": "WARNING"},
	}


dictConfig(buildLogConfig(settings.HALLYU_LOG_FILE))

crudLogger = logging.getLogger("crud")
requestLogger = logging.getLogger("request")
dataLogger = logging.getLogger("data")
