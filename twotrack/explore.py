from functools import partial
from multiprocessing import Pool
from typing import Dict, List, Tuple, Type

import pandas as pd

from twotrack.compose import attempt
from twotrack.defines import (
    EXCEPTIONS,
    ERROR_COL,
    ID,
    ID_COL,
    RESULT_COL,
    Attempt,
    Outcome,
)
from twotrack.result import Result


def results_to_df(results: Dict[ID, Result]) -> pd.DataFrame:
    """
    One row per id with the success value and the error.
    The column that doesn't apply to a row holds None.
    """
    return pd.DataFrame(
        {
            ID_COL: pd.Series(list(results), dtype=object),
            RESULT_COL: pd.Series(
                [result.result() for result in results.values()], dtype=object
            ),
            ERROR_COL: pd.Series(
                [result.error() for result in results.values()], dtype=object
            ),
        }
    )


def _attempt_id(
    id_: ID,
    fn: Attempt,
    exceptions: Tuple[Type[Exception], ...],
) -> Tuple[ID, Outcome]:
    return id_, attempt(fn, id_, exceptions=exceptions)


def explore(
    fn: Attempt,
    ids: List[ID],
    multiprocess_workers: int = 0,
    exceptions: Tuple[Type[Exception], ...] = EXCEPTIONS,
) -> pd.DataFrame:
    """
    Call fn on every id, capturing exceptions, and summarize the results in a DataFrame.
    If multiprocess_workers is 0, does not multiprocess.
    Rows follow the order of ids. Repeated ids are only kept once.
    """
    summarizer = partial(_attempt_id, fn=fn, exceptions=exceptions)
    pool = None
    try:
        if multiprocess_workers:
            pool = Pool(multiprocess_workers)
            mapper = pool.imap_unordered(summarizer, ids)
        else:
            mapper = map(summarizer, ids)

        outcomes = {}
        for i, (id_, result) in enumerate(mapper):
            outcomes[id_] = result
            print(f"{(i + 1) / len(ids):.1%} done.", end="\r")
    finally:
        if pool is not None:
            pool.close()
    return results_to_df({id_: outcomes[id_] for id_ in ids})


def error_counts(df: pd.DataFrame) -> pd.Series:
    """How many times each distinct error appears in a summary DataFrame"""
    return df[ERROR_COL].dropna().value_counts()
