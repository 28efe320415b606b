from graphconv.bootstrap.deps import get_config, get_converter
from graphconv.core.converter import Converter
from graphconv.core.helpers.utils import setup_logging


def init() -> Converter:
    """
    Resolve the configuration, install logging and build the process-wide
    converter. Meant to be called once by the application at startup;
    the module-level functions of graphconv.api work without it.
    """
    config = get_config()
    setup_logging(config.log_level)
    return get_converter()
