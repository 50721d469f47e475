import logging
from pathlib import Path

import pandas as pd

from gpdesk.config import Settings
from gpdesk.errors import DataSourceError
from gpdesk.schemas import ReferenceRow


logger = logging.getLogger(__name__)


def _find_column(columns: list[str], name: str) -> str | None:
    wanted = name.strip().lower()
    for column in columns:
        if str(column).strip().lower() == wanted:
            return column
    return None


def read_reference_rows(
    path: Path,
    *,
    primary_id_column: str,
    secondary_id_column: str,
    secondary_id_alias_column: str,
    contact_column: str,
) -> list[ReferenceRow]:
    if not path.exists():
        raise DataSourceError(f"reference table not found: {path}")

    try:
        frame = pd.read_excel(path, sheet_name=0, dtype=str)
    except Exception as exc:
        raise DataSourceError(f"failed to read reference table {path}: {exc}") from exc
    frame = frame.fillna("")

    columns = list(frame.columns)
    primary_col = _find_column(columns, primary_id_column)
    if primary_col is None:
        raise DataSourceError(f"reference table has no '{primary_id_column}' column")

    secondary_col = _find_column(columns, secondary_id_column)
    if secondary_col is None:
        # Older sheets label the secondary identifier with the alias name.
        secondary_col = _find_column(columns, secondary_id_alias_column)
        if secondary_col is not None:
            logger.info(
                "using alias column for secondary identifier",
                extra={"column": secondary_col, "path": str(path)},
            )
    if secondary_col is None:
        raise DataSourceError(
            f"reference table has neither '{secondary_id_column}' nor '{secondary_id_alias_column}' column"
        )

    contact_col = _find_column(columns, contact_column)

    rows: list[ReferenceRow] = []
    for record in frame.to_dict(orient="records"):
        rows.append(
            ReferenceRow(
                gp_id=str(record[primary_col]),
                seeker_id=str(record[secondary_col]),
                contact=str(record[contact_col]) if contact_col is not None else "",
            )
        )
    return rows


class ReferenceTable:
    def __init__(
        self,
        path: str | Path,
        *,
        primary_id_column: str = "GP ID",
        secondary_id_column: str = "Seeker ID",
        secondary_id_alias_column: str = "Robi ID",
        contact_column: str = "1st Level POC (Umbrella ZM)",
    ) -> None:
        self.path = Path(path)
        self.primary_id_column = primary_id_column
        self.secondary_id_column = secondary_id_column
        self.secondary_id_alias_column = secondary_id_alias_column
        self.contact_column = contact_column

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReferenceTable":
        return cls(
            settings.reference_table_path,
            primary_id_column=settings.primary_id_column,
            secondary_id_column=settings.secondary_id_column,
            secondary_id_alias_column=settings.secondary_id_alias_column,
            contact_column=settings.contact_column,
        )

    def load(self) -> list[ReferenceRow]:
        return read_reference_rows(
            self.path,
            primary_id_column=self.primary_id_column,
            secondary_id_column=self.secondary_id_column,
            secondary_id_alias_column=self.secondary_id_alias_column,
            contact_column=self.contact_column,
        )
