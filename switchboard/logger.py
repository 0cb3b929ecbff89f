# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Switchboard."""
import logging

logger: logging.Logger = logging.getLogger("switchboard")
