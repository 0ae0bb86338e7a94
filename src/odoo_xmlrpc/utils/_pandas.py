# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd


def dataframe_to_rows(df: pd.DataFrame, na_as_null: bool = False) -> List[Dict[str, Any]]:
    """Convert a DataFrame to a list of dicts, converting Timestamps to ISO strings.

    :param df: Input DataFrame.
    :param na_as_null: When False (default), missing values are omitted from each dict.
        When True, missing values are included as None, which the server stores as empty.
    """
    rows = []
    for row in df.to_dict(orient="records"):
        clean = {}
        for k, v in row.items():
            if isinstance(v, (list, tuple, dict)) or pd.notna(v):
                clean[k] = v.isoformat() if isinstance(v, pd.Timestamp) else _to_builtin(v)
            elif na_as_null:
                clean[k] = None
        rows.append(clean)
    return rows


def _to_builtin(value: Any) -> Any:
    # numpy scalars cannot be marshalled to XML-RPC
    return value.item() if hasattr(value, "item") else value


def records_to_dataframe(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame from record dicts, keeping missing values as None.

    Columns with missing values are held as ``object`` so that ``None`` is not
    replaced by ``NaN`` or ``NA`` through dtype inference. Complete columns keep
    their inferred dtype.
    """
    df = pd.DataFrame.from_records(rows)
    for col in df.columns[df.isna().any()]:
        values = df[col].astype(object)
        df[col] = values.where(values.notna(), None)
    return df
