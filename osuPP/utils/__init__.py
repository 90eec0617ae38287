from .config import ParserConfig, config_from_args, load_config
from .log_utils import setup_logging
