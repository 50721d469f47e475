import logging
from collections.abc import Iterable
from typing import Protocol

from gpdesk.schemas import (
    ExtractedRecord,
    FullMatch,
    MismatchPrimary,
    MismatchSecondary,
    NoMatch,
    ReconcileOutcome,
    ReferenceRow,
)


logger = logging.getLogger(__name__)


class ReferenceSource(Protocol):
    def load(self) -> list[ReferenceRow]: ...


def _same_id(left: str, right: str) -> bool:
    return left.strip().lower() == right.strip().lower()


def reconcile_rows(record: ExtractedRecord, rows: Iterable[ReferenceRow]) -> ReconcileOutcome:
    rows = list(rows)

    for row in rows:
        if _same_id(row.gp_id, record.gp_id) and _same_id(row.seeker_id, record.seeker_id):
            return FullMatch(record=record, contact=row.contact)

    gp_exists = any(_same_id(row.gp_id, record.gp_id) for row in rows)
    seeker_exists = any(_same_id(row.seeker_id, record.seeker_id) for row in rows)

    if gp_exists and not seeker_exists:
        return MismatchSecondary(seeker_id=record.seeker_id)
    if seeker_exists and not gp_exists:
        return MismatchPrimary(gp_id=record.gp_id)
    if gp_exists and seeker_exists:
        # Both IDs exist but on different rows.
        logger.warning(
            "identifiers found on separate reference rows",
            extra={"gp_id": record.gp_id, "seeker_id": record.seeker_id},
        )
    return NoMatch()


class Reconciler:
    def __init__(self, source: ReferenceSource) -> None:
        self.source = source

    def reconcile(self, record: ExtractedRecord) -> ReconcileOutcome:
        rows = self.source.load()
        outcome = reconcile_rows(record, rows)
        logger.info(
            "reconciled record",
            extra={"outcome": outcome.kind, "reference_rows": len(rows)},
        )
        return outcome
