"""
Dataset module - registry of the example datasets bundled with scikit-learn.

Some entries load as DataFrames, others as plain numeric matrices, so the
picker can be narrowed with is_data_frame / is_matrix.
"""
import functools
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from sklearn import datasets as sk_datasets

logger = logging.getLogger(__name__)


def _frame(loader: Callable) -> Callable[[], pd.DataFrame]:
    return lambda: loader(as_frame=True).frame


def _matrix(loader: Callable) -> Callable[[], np.ndarray]:
    return lambda: np.asarray(loader().data)


LOADERS: Dict[str, Callable[[], Any]] = {
    "iris": _frame(sk_datasets.load_iris),
    "wine": _frame(sk_datasets.load_wine),
    "diabetes": _frame(sk_datasets.load_diabetes),
    "breast_cancer": _frame(sk_datasets.load_breast_cancer),
    "digits": _matrix(sk_datasets.load_digits),
    "linnerud": _matrix(sk_datasets.load_linnerud),
}


def is_data_frame(data) -> bool:
    return isinstance(data, pd.DataFrame)


def is_matrix(data) -> bool:
    return isinstance(data, np.ndarray) and data.ndim == 2


@functools.lru_cache(maxsize=None)
def load_dataset(name: str):
    """Load a dataset by name. Results are cached, so callers must not mutate them."""
    try:
        loader = LOADERS[name]
    except KeyError:
        raise KeyError(f"unknown dataset {name!r}") from None
    logger.debug(f"Loading dataset {name!r}")
    return loader()


def list_datasets(filter: Optional[Callable[[Any], bool]] = None) -> List[str]:
    """Names of the registered datasets, optionally only those passing `filter`."""
    names = sorted(LOADERS)
    if filter is None:
        return names
    if not callable(filter):
        raise TypeError(f"filter must be callable, got {type(filter).__name__}")
    return [name for name in names if filter(load_dataset(name))]


def as_frame(data) -> pd.DataFrame:
    """DataFrame view of a dataset; matrix columns are named V1..Vk."""
    if isinstance(data, pd.DataFrame):
        return data
    if is_matrix(data):
        return pd.DataFrame(data, columns=[f"V{i}" for i in range(1, data.shape[1] + 1)])
    raise TypeError(f"expected a DataFrame or 2-d array, got {type(data).__name__}")


def preview(data, rows: int = 6) -> Tuple[List[str], List[List[str]]]:
    """First rows of a dataset as strings, ready for a table output."""
    frame = as_frame(data).head(rows)
    columns = [str(column) for column in frame.columns]
    body = [[_format_cell(value) for value in row] for row in frame.itertuples(index=False)]
    return columns, body


def _format_cell(value) -> str:
    if isinstance(value, (float, np.floating)):
        return f"{value:.4g}"
    return str(value)
