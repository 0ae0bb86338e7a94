# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""pandas DataFrame operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

import pandas as pd

from ..models.filters import SearchFilter
from ..utils._pandas import dataframe_to_rows, records_to_dataframe

if TYPE_CHECKING:
    from ..client import OdooClient


class DataFrameOperations:
    """
    DataFrame-oriented wrappers over record and query operations.

    Accessed via ``client.dataframe``.

    Example::

        df = client.dataframe.search_read("res.partner", [SearchFilter.eq("is_company", True)])
        print(df[["id", "name"]])

        new_ids = client.dataframe.create("res.partner", pd.DataFrame([{"name": "A"}, {"name": "B"}]))
    """

    def __init__(self, client: "OdooClient") -> None:
        self._client = client

    def search_read(
        self,
        model: str,
        filters: Optional[Iterable[SearchFilter]] = None,
        order: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Search and read records into a DataFrame, one row per record.

        ``False`` values arrive as ``None``. An empty DataFrame is returned
        when nothing matches.

        :rtype: pandas.DataFrame
        """
        records = self._client.query.search_read(model, filters, order, offset, limit)
        return records_to_dataframe([r.to_dict() for r in records])

    def create(self, model: str, df: pd.DataFrame, na_as_null: bool = False) -> List[int]:
        """
        Create one record per DataFrame row.

        Each row is a separate ``create`` call; a failure stops at the failing
        row and earlier rows stay created.

        :param model: Model name.
        :param df: Rows to create; column names are field names.
        :param na_as_null: Send missing cells as ``None`` instead of omitting them.
        :return: Ids of the created records, in row order.
        :rtype: list[int]
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")
        return [self._client.records.create(model, row) for row in dataframe_to_rows(df, na_as_null=na_as_null)]


__all__ = ["DataFrameOperations"]
