from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from gpdesk.config import Settings
from gpdesk.errors import ServiceError
from gpdesk.extractor import FieldExtractor
from gpdesk.pipeline import MessagePipeline
from gpdesk.reconciler import Reconciler
from gpdesk.reference import ReferenceTable


CONTACT_COLUMN = "1st Level POC (Umbrella ZM)"

REFERENCE_ROWS = [
    {"GP ID": "1001", "Seeker ID": "77", CONTACT_COLUMN: "Jane"},
    {"GP ID": "GP-AA1122", "Seeker ID": "SKR-Bb9", CONTACT_COLUMN: "Omar"},
    {"GP ID": "2002", "Seeker ID": "88", CONTACT_COLUMN: None},
]


class FakeTextService:
    def __init__(self, reply: str | None = None, error: ServiceError | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        assert self.reply is not None
        return self.reply


def write_workbook(path: Path, rows: list[dict[str, object]]) -> Path:
    pd.DataFrame(rows).to_excel(path, index=False)
    return path


@pytest.fixture()
def reference_path(tmp_path: Path) -> Path:
    return write_workbook(tmp_path / "data.xlsx", REFERENCE_ROWS)


@pytest.fixture()
def test_settings(reference_path: Path) -> Settings:
    return Settings(
        app_name="gpdesk",
        log_level="INFO",
        gemini_api_key="test-key",
        gemini_model="gemini-2.0-flash",
        gemini_base_url="https://gemini.invalid/v1beta",
        gemini_timeout_seconds=5,
        reference_table_path=str(reference_path),
        primary_id_column="GP ID",
        secondary_id_column="Seeker ID",
        secondary_id_alias_column="Robi ID",
        contact_column=CONTACT_COLUMN,
        host="127.0.0.1",
        port=3000,
    )


@pytest.fixture()
def make_pipeline(test_settings: Settings) -> Callable[..., MessagePipeline]:
    def _make(service: FakeTextService) -> MessagePipeline:
        return MessagePipeline(
            FieldExtractor(service),
            Reconciler(ReferenceTable.from_settings(test_settings)),
        )

    return _make
