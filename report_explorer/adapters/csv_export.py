"""CSV serialization of the rows shown in tables."""

from collections.abc import Mapping, Sequence

import pandas as pd

Column = tuple[str, str]


def records_to_csv(
    records: Sequence[Mapping[str, object]],
    columns: Sequence[Column],
) -> str:
    """Serialize table records to CSV text.

    Values containing a comma (or a quote or newline) are wrapped in double
    quotes; missing values are written as empty strings.

    Args:
        records: Rows keyed by field name.
        columns: ``(field, header)`` pairs in output order.

    Returns:
        str: Header line followed by one line per record, no trailing newline.
    """
    fields = [field for field, _header in columns]
    frame = pd.DataFrame(
        [[record.get(field) for field in fields] for record in records],
        columns=[header for _field, header in columns],
        dtype=object,
    )
    text = frame.to_csv(index=False, lineterminator="\n", na_rep="")
    return text.rstrip("\n")


__all__ = ["Column", "records_to_csv"]
