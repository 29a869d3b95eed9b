import re
from typing import Any

# (prefix)(secret) pairs; only the secret group is replaced
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(X-BUGZILLA-API-KEY:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Authorization:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(api[_-]token\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
]

SENSITIVE_KEYS = {"authorization", "api_token", "api-token", "token", "password", "secret"}


def redact_text(text: str) -> str:
    """Mask credentials embedded in free text (error bodies, log messages)."""
    if not text:
        return text
    for pattern in SECRET_PATTERNS:
        text = re.sub(pattern, r"\1[REDACTED]", text, flags=re.IGNORECASE)
    return text


def redact_value(key: str, value: Any) -> Any:
    if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
        return "[REDACTED]"
    if isinstance(value, str):
        return redact_text(value)
    return value


def redaction_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that masks secrets in every event field."""
    return {key: redact_value(str(key), value) for key, value in event_dict.items()}
