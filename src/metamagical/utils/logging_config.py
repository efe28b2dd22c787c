"""Logging configuration for Meta:Magical."""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional, Dict


class MetaMagicalLogger:
    """Centralized logging configuration for Meta:Magical."""

    _loggers: Dict[str, logging.Logger] = {}
    _configured = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance for the given name."""
        if name not in cls._loggers:
            cls._setup_logging_if_needed()
            cls._loggers[name] = logging.getLogger(f"metamagical.{name}")
        return cls._loggers[name]

    @classmethod
    def _setup_logging_if_needed(cls):
        """Set up logging configuration if not already done."""
        if not cls._configured:
            cls.setup_logging()

    @classmethod
    def setup_logging(
        cls,
        level: str = None,
        log_file: Optional[str] = None,
        format_string: Optional[str] = None,
        enable_console: bool = True,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        """
        Configure logging for Meta:Magical.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (optional)
            format_string: Custom log format string
            enable_console: Whether to log to console
            max_file_size: Maximum size of log file before rotation
            backup_count: Number of backup log files to keep
        """
        # A library stays quiet unless asked otherwise
        log_level = (level or os.getenv('METAMAGICAL_LOG_LEVEL', 'WARNING')).upper()

        if not format_string:
            format_string = os.getenv(
                'METAMAGICAL_LOG_FORMAT',
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {
                    'format': format_string,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                },
                'detailed': {
                    'format': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s() - %(message)s',
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {},
            'loggers': {
                'metamagical': {
                    'level': log_level,
                    'handlers': [],
                    'propagate': False
                }
            }
        }

        if enable_console:
            config['handlers']['console'] = {
                'class': 'logging.StreamHandler',
                'level': log_level,
                'formatter': 'standard',
                'stream': 'ext://sys.stdout'
            }
            config['loggers']['metamagical']['handlers'].append('console')

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': log_level,
                'formatter': 'detailed',
                'filename': log_file,
                'maxBytes': max_file_size,
                'backupCount': backup_count,
                'encoding': 'utf8'
            }
            config['loggers']['metamagical']['handlers'].append('file')

        logging.config.dictConfig(config)
        cls._configured = True

        logger = logging.getLogger('metamagical.config')
        logger.info(f"Logging configured - Level: {log_level}, Console: {enable_console}, File: {log_file or 'None'}")


def get_logger(name: str) -> logging.Logger:
    """Convenience function to get a logger instance."""
    return MetaMagicalLogger.get_logger(name)
