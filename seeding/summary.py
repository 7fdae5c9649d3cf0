from typing import Sequence

import pandas as pd


def summarize(records: Sequence) -> pd.DataFrame:
    """
    Count seeded records per route, e.g. for the end-of-run printout:

        routeCode puvType  count
               R3     Bus      5
    """
    rows = [
        {
            "routeCode": record.route_code,
            "puvType": _puv_type(record).value,
        }
        for record in records
    ]
    if not rows:
        return pd.DataFrame(columns=["routeCode", "puvType", "count"])

    df = pd.DataFrame(rows)
    return (
        df.groupby(["routeCode", "puvType"], sort=False)
        .size()
        .reset_index(name="count")
    )


def _puv_type(record):
    # drivers carry puv_type, commuters carry selected_puv_type
    return getattr(record, "puv_type", None) or record.selected_puv_type
