from ._config import PyoConfig, get_config, set_config
from ._errors import InvalidArgumentError, check_count
from ._main import Pipeable

__all__ = [
    "InvalidArgumentError",
    "Pipeable",
    "PyoConfig",
    "check_count",
    "get_config",
    "set_config",
]
