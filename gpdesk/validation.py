from gpdesk.schemas import FIELD_LABELS, Complete, Completeness, Empty, ExtractedRecord, Missing


def classify(record: ExtractedRecord | None) -> Completeness:
    if record is None:
        return Empty()

    values = record.values()
    if all(not value.strip() for value in values.values()):
        return Empty()

    missing = tuple(label for name, label in FIELD_LABELS.items() if not values[name].strip())
    if missing:
        return Missing(missing)
    return Complete(record)
