"""Contact form sanitization and validation.

Rules:
    name     trimmed, 2..100 characters, HTML-escaped
    email    trimmed, valid address, normalized (lowercased; gmail dots and
             +tags dropped; +tags dropped for Outlook and iCloud, -tags
             for Yahoo)
    subject  trimmed, 5..200 characters, HTML-escaped
    message  trimmed, 10..1000 characters, HTML-escaped

Lengths are checked on the trimmed text the user typed; escaping happens
afterwards so "&" counts as one character.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from email_validator import EmailNotValidError, validate_email
from markupsafe import escape

LENGTHS = {
    "name": (2, 100, "Name must be between 2 and 100 characters"),
    "subject": (5, 200, "Subject must be between 5 and 200 characters"),
    "message": (10, 1000, "Message must be between 10 and 1000 characters"),
}
EMAIL_MESSAGE = "Please provide a valid email address"

GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}
ICLOUD_DOMAINS = {"icloud.com", "me.com"}
OUTLOOK_DOMAINS = {
    "hotmail.at", "hotmail.be", "hotmail.ca", "hotmail.cl", "hotmail.co.il", "hotmail.co.nz",
    "hotmail.co.th", "hotmail.co.uk", "hotmail.com", "hotmail.com.ar", "hotmail.com.au",
    "hotmail.com.br", "hotmail.com.gr", "hotmail.com.mx", "hotmail.com.pe", "hotmail.com.tr",
    "hotmail.com.vn", "hotmail.cz", "hotmail.de", "hotmail.dk", "hotmail.es", "hotmail.fr",
    "hotmail.hu", "hotmail.id", "hotmail.ie", "hotmail.in", "hotmail.it", "hotmail.jp",
    "hotmail.kr", "hotmail.lv", "hotmail.my", "hotmail.ph", "hotmail.pt", "hotmail.sa",
    "hotmail.sg", "hotmail.sk", "live.be", "live.co.uk", "live.com", "live.com.ar",
    "live.com.mx", "live.de", "live.es", "live.eu", "live.fr", "live.it", "live.nl",
    "msn.com", "outlook.at", "outlook.be", "outlook.cl", "outlook.co.il", "outlook.co.nz",
    "outlook.co.th", "outlook.com", "outlook.com.ar", "outlook.com.au", "outlook.com.br",
    "outlook.com.gr", "outlook.com.pe", "outlook.com.tr", "outlook.com.vn", "outlook.cz",
    "outlook.de", "outlook.dk", "outlook.es", "outlook.fr", "outlook.hu", "outlook.id",
    "outlook.ie", "outlook.in", "outlook.it", "outlook.jp", "outlook.kr", "outlook.lv",
    "outlook.my", "outlook.ph", "outlook.pt", "outlook.sa", "outlook.sg", "outlook.sk",
    "passport.com",
}
YAHOO_DOMAINS = {
    "rocketmail.com", "yahoo.ca", "yahoo.co.uk", "yahoo.com", "yahoo.de", "yahoo.fr",
    "yahoo.in", "yahoo.it", "ymail.com",
}


def _text(value: Any) -> str:
    """Coerce a submitted value to trimmed text (missing/non-text -> '')."""
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _error(path: str, msg: str, value: Any) -> Dict[str, Any]:
    return {"type": "field", "path": path, "msg": msg, "value": value, "location": "body"}


def normalize_email(address: str) -> str:
    """Canonical form of an already-valid address."""
    local, _, domain = address.rpartition("@")
    local, domain = local.lower(), domain.lower()
    if domain in GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in ICLOUD_DOMAINS or domain in OUTLOOK_DOMAINS:
        local = local.split("+", 1)[0] or local
    elif domain in YAHOO_DOMAINS:
        # only the last -tag goes
        local = local.rsplit("-", 1)[0] or local
    return f"{local}@{domain}"


def validate_contact(payload: Mapping[str, Any]) -> Tuple[Dict[str, str], List[Dict[str, Any]]]:
    """Return ``(clean_fields, errors)``; ``errors`` is empty when the payload is valid."""
    clean: Dict[str, str] = {}
    errors: List[Dict[str, Any]] = []

    for field in ("name", "email", "subject", "message"):
        raw = payload.get(field)
        text = _text(raw)

        if field == "email":
            try:
                checked = validate_email(text, check_deliverability=False)
            except EmailNotValidError:
                errors.append(_error(field, EMAIL_MESSAGE, text))
                continue
            clean[field] = normalize_email(checked.normalized)
            continue

        low, high, msg = LENGTHS[field]
        if not low <= len(text) <= high:
            errors.append(_error(field, msg, text))
            continue
        clean[field] = str(escape(text))

    return clean, errors
