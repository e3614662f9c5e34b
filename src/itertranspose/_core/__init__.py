from ._config import Config, clone_error, get_config, set_config
from ._depreciation import deprecated
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "clone_error",
    "Pipeable",
    "deprecated",
    "get_config",
    "set_config",
]
