from dataclasses import dataclass
from typing import ClassVar


FIELD_LABELS: dict[str, str] = {
    "gp_id": "GP ID",
    "seeker_id": "Seeker ID",
    "event_date": "Event Date",
    "event_time": "Event Time",
    "issue_details": "Issue Details",
}


@dataclass(frozen=True)
class ExtractedRecord:
    gp_id: str = ""
    seeker_id: str = ""
    event_date: str = ""
    event_time: str = ""
    issue_details: str = ""

    def values(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in FIELD_LABELS}


@dataclass(frozen=True)
class ReferenceRow:
    gp_id: str
    seeker_id: str
    contact: str


@dataclass(frozen=True)
class InboundMessage:
    sender: str
    body: str


# Completeness classification


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Missing:
    fields: tuple[str, ...]


@dataclass(frozen=True)
class Complete:
    record: ExtractedRecord


Completeness = Empty | Missing | Complete


# Pipeline outcomes


@dataclass(frozen=True)
class ServiceUnavailable:
    kind: ClassVar[str] = "service_unavailable"


@dataclass(frozen=True)
class NoData:
    kind: ClassVar[str] = "no_data"


@dataclass(frozen=True)
class MissingFields:
    fields: tuple[str, ...]
    kind: ClassVar[str] = "missing_fields"


@dataclass(frozen=True)
class FullMatch:
    record: ExtractedRecord
    contact: str
    kind: ClassVar[str] = "full_match"


@dataclass(frozen=True)
class MismatchSecondary:
    seeker_id: str
    kind: ClassVar[str] = "mismatch_secondary"


@dataclass(frozen=True)
class MismatchPrimary:
    gp_id: str
    kind: ClassVar[str] = "mismatch_primary"


@dataclass(frozen=True)
class NoMatch:
    kind: ClassVar[str] = "no_match"


@dataclass(frozen=True)
class LookupFailed:
    kind: ClassVar[str] = "lookup_failed"


ReconcileOutcome = FullMatch | MismatchSecondary | MismatchPrimary | NoMatch
PipelineOutcome = (
    ServiceUnavailable
    | NoData
    | MissingFields
    | FullMatch
    | MismatchSecondary
    | MismatchPrimary
    | NoMatch
    | LookupFailed
)


@dataclass(frozen=True)
class PipelineResult:
    outcome: PipelineOutcome
    reply: str | None
