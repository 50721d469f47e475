from gpdesk.schemas import (
    FIELD_LABELS,
    FullMatch,
    LookupFailed,
    MismatchPrimary,
    MismatchSecondary,
    MissingFields,
    NoData,
    NoMatch,
    PipelineOutcome,
    ServiceUnavailable,
)


SERVICE_UNAVAILABLE_REPLY = "Server is unavailable. Please wait or try again after sometime."
LOOKUP_FAILED_REPLY = "❌ Failed to read the reference data. Please try again later."

FORMAT_REMINDER = """GP ID: XXXX
Seeker ID: XXXXX
Event Date: mm/dd/yyyy
Event Time: hh:mm:ss AM/PM
Issue Details: ---"""

REQUIRED_FIELDS_LINE = ", ".join(FIELD_LABELS.values())


def compose(outcome: PipelineOutcome) -> str | None:
    match outcome:
        case NoData():
            return None
        case ServiceUnavailable():
            return SERVICE_UNAVAILABLE_REPLY
        case LookupFailed():
            return LOOKUP_FAILED_REPLY
        case MissingFields(fields=fields):
            return f"⚠️ Missing fields: {', '.join(fields)}\n\n*You must enter the following fields:*\n{REQUIRED_FIELDS_LINE}"
        case FullMatch(record=record, contact=contact):
            return "\n".join(
                [
                    f"✅ GP ID: {record.gp_id}",
                    f"Seeker ID: {record.seeker_id}",
                    f"Event Date: {record.event_date}",
                    f"Event Time: {record.event_time}",
                    f"Issue Details: {record.issue_details}",
                    f"GP POC: {contact}",
                ]
            )
        case MismatchSecondary(seeker_id=seeker_id):
            return f'❌ Incorrect Seeker ID: "{seeker_id}".'
        case MismatchPrimary(gp_id=gp_id):
            return f'❌ Incorrect GP ID: "{gp_id}".'
        case NoMatch():
            return f"❌ No relevant site found! Please check your input and follow the format:\n\n{FORMAT_REMINDER}"
    raise TypeError(f"unknown outcome: {outcome!r}")
