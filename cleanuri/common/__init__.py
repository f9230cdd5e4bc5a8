# Common utilities
from .config_loader import load_config, load_site_providers
from .log_config import log_exception, logging_exception_handler, setup_logging
