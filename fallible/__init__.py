"""Exception-free Result type: Ok(value) or Err(error)."""

from fallible.collect import collect, from_optional, partition
from fallible.config import Settings, setup_logging_from_settings
from fallible.logging_config import get_logger, setup_logging
from fallible.observe import log_result, logged
from fallible.result import Err, Ok, Result

__all__ = [
    "Err",
    "Ok",
    "Result",
    "Settings",
    "collect",
    "from_optional",
    "get_logger",
    "log_result",
    "logged",
    "partition",
    "setup_logging",
    "setup_logging_from_settings",
]
