"""Field checks done by the views before anything reaches the repository."""

import time

from projecthub.errors import ValidationError
from projecthub.models import PRIORITIES, STATUSES
from projecthub.utils.ids import parse_timestamp


def _text(payload, field):
    value = payload.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip()


def project_form(payload, partial=False):
    """Return the project fields in ``payload``; title and description required unless ``partial``."""
    fields = {}
    for field in ("title", "description"):
        if partial and field not in payload:
            continue
        value = _text(payload, field)
        if not value:
            raise ValidationError(f"Project {field} is required")
        fields[field] = value
    return fields


def task_form(payload, partial=False):
    fields = {}
    if not partial or "title" in payload:
        title = _text(payload, "title")
        if not title:
            raise ValidationError("Task title is required")
        fields["title"] = title
    if "description" in payload:
        fields["description"] = _text(payload, "description")
    if "priority" in payload or not partial:
        # Only a brand new task falls back to medium; updates must name one.
        priority = payload.get("priority") if partial else payload.get("priority") or "medium"
        if priority not in PRIORITIES:
            raise ValidationError("Priority must be one of low, medium, high")
        fields["priority"] = priority
    if "status" in payload:
        if payload["status"] not in STATUSES:
            raise ValidationError("Status must be pending or completed")
        fields["status"] = payload["status"]
    if not partial or "due_date" in payload:
        due_date = _text(payload, "due_date")
        if not due_date:
            raise ValidationError("Due date is required")
        try:
            parse_timestamp(due_date)
        except ValueError:
            raise ValidationError("Invalid due_date format")
        fields["due_date"] = due_date
    return fields


def submission_instant(payload):
    # Clients send the instant the user submitted the form; without one,
    # submissions within the same second count as the same click.
    return payload.get("submitted_at") or int(time.time())
