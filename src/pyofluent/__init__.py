from ._core import InvalidArgumentError, PyoConfig, get_config, set_config
from ._eager import EagerPipeline
from ._lazy import LazyPipeline
from ._pipeline import Pipeline
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some

__all__ = [
    "NONE",
    "EagerPipeline",
    "InvalidArgumentError",
    "LazyPipeline",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pipeline",
    "PyoConfig",
    "Some",
    "get_config",
    "set_config",
]
