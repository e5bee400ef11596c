"""
PII-safe logging utilities.

Provides minimal masking helpers so contact details never reach the logs in
clear text while keeping them useful for debugging.
"""


def sanitize_email(email: str | None) -> str:
    """
    Sanitize an email address for logs.

    Rules:
    - None / empty / no "@" → fully masked
    - Otherwise → first char of the local part, domain kept
    """
    if not email:
        return "***"

    email = email.strip()
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain:
        return "***"

    return f"{local[0]}***@{domain}"


def sanitize_phone(phone: str | None) -> str:
    """
    Sanitize a phone number for logs.

    Rules:
    - None / empty → empty marker
    - Fewer than 4 digits → fully masked
    - Otherwise → last 2 digits, rest masked
    """
    if not phone or not phone.strip():
        return "-"

    digits = "".join(ch for ch in phone if ch.isdigit())
    if len(digits) < 4:
        return "***"

    return f"***{digits[-2:]}"
