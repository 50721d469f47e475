import logging

from gpdesk.composer import compose
from gpdesk.config import Settings
from gpdesk.errors import DataSourceError, ServiceError
from gpdesk.extractor import FieldExtractor
from gpdesk.reconciler import Reconciler
from gpdesk.reference import ReferenceTable
from gpdesk.schemas import (
    Empty,
    LookupFailed,
    Missing,
    MissingFields,
    NoData,
    PipelineOutcome,
    PipelineResult,
    ServiceUnavailable,
)
from gpdesk.text_service import GeminiClient
from gpdesk.validation import classify


logger = logging.getLogger(__name__)


class MessagePipeline:
    def __init__(self, extractor: FieldExtractor, reconciler: Reconciler) -> None:
        self.extractor = extractor
        self.reconciler = reconciler

    @classmethod
    def from_settings(cls, settings: Settings) -> "MessagePipeline":
        return cls(
            FieldExtractor(GeminiClient.from_settings(settings)),
            Reconciler(ReferenceTable.from_settings(settings)),
        )

    def run(self, message: str) -> PipelineResult:
        outcome = self._outcome_for(message)
        return PipelineResult(outcome=outcome, reply=compose(outcome))

    def _outcome_for(self, message: str) -> PipelineOutcome:
        try:
            record = self.extractor.extract(message)
        except ServiceError:
            logger.exception("field extraction failed")
            return ServiceUnavailable()

        completeness = classify(record)
        if isinstance(completeness, Empty):
            return NoData()
        if isinstance(completeness, Missing):
            logger.info("message is missing fields", extra={"missing_fields": list(completeness.fields)})
            return MissingFields(completeness.fields)

        try:
            return self.reconciler.reconcile(completeness.record)
        except DataSourceError:
            logger.exception("reference lookup failed")
            return LookupFailed()

