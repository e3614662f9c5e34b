from ._entry import transpose_collect, transposed_iter
from ._option_iter import OptionTransposedIter
from ._result_iter import ResultTransposedIter

__all__ = [
    "OptionTransposedIter",
    "ResultTransposedIter",
    "transpose_collect",
    "transposed_iter",
]
