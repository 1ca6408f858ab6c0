"""Error taxonomy shared by the dispatcher, the normalizer and the routers.

Only ValidationError and UpstreamServiceError ever reach a caller.
MalformedResponseError stays inside the normalizer, which always recovers
from it with a fallback value.
"""


class SahayakError(Exception):
    """Base class for all application errors."""


class ValidationError(SahayakError):
    """A required request field is missing or out of range. Maps to HTTP 400."""

    def __init__(self, missing: list[str], message: str | None = None):
        self.missing = list(missing)
        super().__init__(message or f"Missing required fields: {', '.join(self.missing)}")


class UpstreamServiceError(SahayakError):
    """The completion service call failed or timed out. Maps to HTTP 500."""


class MalformedResponseError(SahayakError):
    """Model output could not be parsed as JSON."""


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict)) and not value:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(payload, *names: str) -> None:
    """Raise ValidationError naming every required field that is absent.

    ``payload`` may be a pydantic model or a plain dict. Presence is
    checked, types are not. For models the error names the wire alias
    (``gradeLevel``) rather than the attribute (``grade_level``).
    """
    if isinstance(payload, dict):
        missing = [n for n in names if _is_blank(payload.get(n))]
    else:
        fields = getattr(type(payload), "model_fields", {})
        missing = [
            (fields[n].alias if n in fields and fields[n].alias else n)
            for n in names
            if _is_blank(getattr(payload, n, None))
        ]
    if missing:
        raise ValidationError(missing)
