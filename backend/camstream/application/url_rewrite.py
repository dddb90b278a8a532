"""Media request URL rewriting.

The vendor media server authenticates segment and manifest requests by
query string instead of headers, so every URL the player fetches must
carry the federated token.
"""
from urllib.parse import quote

from ..domain.interfaces import RequestModifier

AUTH_SCHEME_PARAM = "x-auth-scheme"
AUTH_SCHEME_VALUE = "federated-token"
AUTH_TOKEN_PARAM = "x-auth-ft"


def federated_query(token: str) -> str:
    return f"{AUTH_SCHEME_PARAM}={AUTH_SCHEME_VALUE}&{AUTH_TOKEN_PARAM}={quote(token, safe='')}"


def append_federated_token(url: str, token: str) -> str:
    """
    Append the federated auth parameters to a media URL.

    "https://h/a.mpd"       -> "https://h/a.mpd?x-auth-scheme=federated-token&x-auth-ft=T"
    "https://h/a.mpd?x=1"   -> "https://h/a.mpd?x=1&x-auth-scheme=federated-token&x-auth-ft=T"

    Any fragment is kept at the end.
    """
    base, sep, fragment = url.partition("#")

    if "?" not in base:
        joiner = "?"
    elif base.endswith(("?", "&")):
        joiner = ""
    else:
        joiner = "&"

    rewritten = f"{base}{joiner}{federated_query(token)}"
    return f"{rewritten}{sep}{fragment}"


def federated_request_modifier(token: str) -> RequestModifier:
    """Build the str -> str hook handed to the player."""
    if not token:
        raise ValueError("Cannot build request modifier without a token")

    def modify_request_url(url: str) -> str:
        return append_federated_token(url, token)

    return modify_request_url
