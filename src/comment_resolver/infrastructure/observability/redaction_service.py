import re

# Regex patterns for common secrets
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Private-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Authorization:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(api[_-]?key\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
    r"(access_token=)([a-zA-Z0-9\-\._~+/=]+)",
    r"()(gh[pousr]_[A-Za-z0-9]{20,})",
    r"()(glpat-[A-Za-z0-9\-_]{20,})",
    r"()(sk-[A-Za-z0-9\-_]{20,})",
]


def redact_text(text: str) -> str:
    """
    Redacts secrets from a string using regex patterns.
    """
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        # Replace the captured group 2 (the secret) with [REDACTED]
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)

    return redacted_text
