"""
Getting hold of an authorized HTTP client for the API services.

The bindings themselves never authenticate, they take whatever HTTP client
they are given.  This is the short path from google-auth credentials to one:
explicit credentials, an authorized user file, or application default
credentials (GOOGLE_APPLICATION_CREDENTIALS, gcloud, metadata server).
"""
from collections.abc import Iterable
from pathlib import Path
import logging

import google.auth
from google.auth.credentials import Credentials as BaseCredentials
from google.auth.transport.requests import AuthorizedSession
from google.oauth2.credentials import Credentials

logger = logging.getLogger(__name__)

_SCOPES = {
    "genomics": "https://www.googleapis.com/auth/genomics",
    "genomics-ro": "https://www.googleapis.com/auth/genomics.readonly",
    "bigquery": "https://www.googleapis.com/auth/bigquery",
    "devstorage-rw": "https://www.googleapis.com/auth/devstorage.read_write",
    "mapsengine": "https://www.googleapis.com/auth/mapsengine",
    "mapsengine-ro": "https://www.googleapis.com/auth/mapsengine.readonly",
}
_SCOPE_URL_PREFIX = "https://www.googleapis.com/"


def get_scope(scope: str) -> str:
    """
    Get a scope based on simplified label.
    A raw URL will also be expected.  Unknown labels give "".
    """
    s = str(scope)
    sc = _SCOPES.get(s, "")
    if not sc and s.startswith(_SCOPE_URL_PREFIX):
        sc = s
    return sc


def get_scopes(scopes: None|str|Iterable[str]) -> list[str]:
    """Resolve a label, URL, or list of either into scope URLs, dropping unknowns."""
    if scopes is None:
        return []
    items = [scopes] if isinstance(scopes, str) or not isinstance(scopes, Iterable) else scopes
    slist = []
    for i in items:
        s = get_scope(str(i))
        if s and s not in slist:
            slist.append(s)
    return slist


def authorized_session(scopes: None|str|Iterable[str] = None,
                       credentials: BaseCredentials|None = None,
                       cred_file: Path|str|None = None) -> AuthorizedSession:
    """
    Wrap credentials in an AuthorizedSession usable as the http client of an
    ApiService.  Credentials are taken in order from the credentials argument,
    an authorized user json file (as saved after an OAuth flow), then
    application default credentials.
    Raises google.auth.exceptions.DefaultCredentialsError when there is nothing
    to be found.
    """
    requested_scopes = get_scopes(scopes)
    if credentials is None and cred_file is not None:
        cf = Path(cred_file).resolve()
        logger.debug("loading authorized user credentials from %s", cf)
        credentials = Credentials.from_authorized_user_file(str(cf), requested_scopes or None)
    if credentials is None:
        credentials, project = google.auth.default(scopes=requested_scopes or None)
        logger.debug("using application default credentials (project %s)", project)
    return AuthorizedSession(credentials)
