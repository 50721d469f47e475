import json
import logging
import re

from gpdesk.errors import ServiceError
from gpdesk.schemas import FIELD_LABELS, ExtractedRecord
from gpdesk.text_service import TextService


logger = logging.getLogger(__name__)

NULL_SENTINEL = "null"

EXTRACTION_PROMPT = """You will receive a message. Extract ONLY the following fields if they are clearly present in the message with the label or field name. Don't take any data without label or field name not mentioned:

- GP ID (e.g., GP ID: 12345)
- Seeker ID (e.g., Seeker ID: 67890)
- Event Date (e.g., mm/dd/yyyy or dd/mm/yyyy)
- Event Time (e.g., 09:00 AM or 15:30)
- Issue Details (Any description of a problem or issue)

If you can't find ANY of these fields clearly, return: null

Otherwise, return JSON in the following format:
{
  "gp_id": "",
  "seeker_id": "",
  "event_date": "",
  "event_time": "",
  "issue_details": ""
}

DO NOT take any value without the label is present. If there is no label "GP ID:", "Seeker ID:", "Event Date:", "Event Time:", "Issue Details:" specifically. Return only raw JSON or null.
DO NOT take any letter duplicate or ignore any letter from the IDs. Handle it carefully.
Message: \"\"\"{message}\"\"\""""

_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)


def build_prompt(message: str) -> str:
    return EXTRACTION_PROMPT.replace("{message}", message)


def strip_code_fence(text: str) -> str:
    return _FENCE_PATTERN.sub("", text).strip()


def parse_extraction_reply(text: str) -> ExtractedRecord | None:
    cleaned = strip_code_fence(text)
    if cleaned == NULL_SENTINEL:
        return None

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ServiceError(f"extraction reply is not valid JSON: {exc.msg}") from exc

    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise ServiceError(f"extraction reply has unexpected shape: {type(parsed).__name__}")

    fields: dict[str, str] = {}
    for name in FIELD_LABELS:
        value = parsed.get(name)
        if value is None:
            fields[name] = ""
        elif isinstance(value, str):
            # Values pass through verbatim so repeated ID characters survive.
            fields[name] = value
        else:
            raise ServiceError(f"extraction field '{name}' is not a string: {type(value).__name__}")
    return ExtractedRecord(**fields)


class FieldExtractor:
    def __init__(self, service: TextService) -> None:
        self.service = service

    def extract(self, message: str) -> ExtractedRecord | None:
        reply = self.service.generate(build_prompt(message))
        record = parse_extraction_reply(reply)
        if record is None:
            logger.info("extraction found no labeled fields")
        return record
