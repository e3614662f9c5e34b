from ._core import Config, clone_error, get_config, set_config
from ._iter import Iter
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._transpose import (
    OptionTransposedIter,
    ResultTransposedIter,
    transpose_collect,
    transposed_iter,
)

__all__ = [
    "NONE",
    "Config",
    "Err",
    "Iter",
    "NoneOption",
    "Ok",
    "Option",
    "OptionTransposedIter",
    "OptionUnwrapError",
    "Result",
    "ResultTransposedIter",
    "ResultUnwrapError",
    "Some",
    "clone_error",
    "get_config",
    "set_config",
    "transpose_collect",
    "transposed_iter",
]
