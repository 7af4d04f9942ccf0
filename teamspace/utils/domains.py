"""
Domain and URL helpers used by Team validation and routing.
"""

import re
from urllib.parse import urlsplit

# Subdomains that are never available to teams
RESERVED_SUBDOMAINS = frozenset(
    [
        "about",
        "account",
        "admin",
        "advertising",
        "api",
        "app",
        "archive",
        "assets",
        "beta",
        "billing",
        "blog",
        "cache",
        "cdn",
        "code",
        "community",
        "dashboard",
        "developer",
        "developers",
        "forum",
        "help",
        "home",
        "http",
        "https",
        "imap",
        "localhost",
        "mail",
        "marketing",
        "mobile",
        "multiplayer",
        "new",
        "news",
        "newsletter",
        "ns1",
        "ns2",
        "ns3",
        "ns4",
        "password",
        "profile",
        "realtime",
        "sandbox",
        "script",
        "scripts",
        "setup",
        "signin",
        "signup",
        "site",
        "smtp",
        "static",
        "stats",
        "status",
        "support",
        "test",
        "update",
        "updates",
        "web",
        "websockets",
        "ws",
        "wss",
        "www",
        "www1",
        "www2",
        "www3",
        "www4",
    ]
)

SUBDOMAIN_PATTERN = re.compile(r"^[a-z\d-]+$", re.IGNORECASE)

_LABEL_PATTERN = re.compile(r"^(?!-)[a-z\d-]{1,63}(?<!-)$", re.IGNORECASE)
_TLD_PATTERN = re.compile(r"^([a-z¡-￿]{2,}|xn--[a-z\d-]{2,})$", re.IGNORECASE)


def is_fqdn(value: str) -> bool:
    """Check whether value is a fully-qualified domain name (example.com)."""
    if not value or any(ch.isspace() for ch in value):
        return False

    # A single trailing dot is allowed ("example.com.")
    if value.endswith("."):
        value = value[:-1]

    labels = value.split(".")
    if len(labels) < 2:
        return False

    if not _TLD_PATTERN.match(labels[-1]):
        return False

    return all(_LABEL_PATTERN.match(label) for label in labels)


def is_url(value: str) -> bool:
    """Check whether value is by itself an absolute URL (scheme and host)."""
    if not value or any(ch.isspace() for ch in value.strip()):
        return False

    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False

    return bool(parts.scheme) and bool(parts.hostname)
