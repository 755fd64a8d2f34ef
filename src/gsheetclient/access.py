from collections.abc import Iterable
from pathlib import Path
import json
import logging

import google.auth.exceptions
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from googleapiclient.discovery import build, Resource
import googleapiclient.discovery_cache as gws_discovery_cache

from .errors import AuthError

logger = logging.getLogger(__name__)

class GoogleSheetsAccess():
    """
    Authenticated access to Google Sheets with a service account.
    See https://developers.google.com/workspace/guides/create-credentials#service-account
    for how to get a key file.  Signing and token exchange are entirely
    google-auth's business, this just loads the key and hands the credentials
    to the discovery client.

    There is no module level singleton, an instance is created by whoever
    needs a service and passed along from there.
    """

    SCOPES = {
        "sheets": "https://www.googleapis.com/auth/spreadsheets",
        "sheets-ro": "https://www.googleapis.com/auth/spreadsheets.readonly",
        "drive-file": "https://www.googleapis.com/auth/drive.file",
        "drive": "https://www.googleapis.com/auth/drive",
        "drive-ro": "https://www.googleapis.com/auth/drive.readonly",
    }
    SCOPE_URL_PREFIX = "https://www.googleapis.com/"

    def __init__(self, credentials: service_account.Credentials) -> None:
        self._creds = credentials
        self._discovery_cache = gws_discovery_cache.autodetect()
        self._services = {}

    def __str__(self) -> str:
        email = getattr(self._creds, "service_account_email", "")
        return f"{email}:{str(self.scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be expected.
        """
        s = str(scope)
        sc = cls.SCOPES.get(s, "")
        if not sc and s.startswith(cls.SCOPE_URL_PREFIX):
            sc = s
        return sc

    @classmethod
    def resolve_scopes(cls, scopes: str|Iterable[str]) -> list[str]:
        """Resolve a label, URL or list of them, unknown ones are an error."""
        slist = [scopes] if isinstance(scopes, str) else list(scopes)
        resolved = []
        for s in slist:
            sc = cls.get_scope(s)
            if not sc:
                raise AuthError(f"Unknown scope: {s}")
            if sc not in resolved:
                resolved.append(sc)
        if not resolved:
            raise AuthError("At least one scope is required")
        return resolved

    @classmethod
    def from_service_account_info(cls, info: dict, scopes: str|Iterable[str] = "sheets"):
        requested_scopes = cls.resolve_scopes(scopes)
        try:
            creds = service_account.Credentials.from_service_account_info(info, scopes=requested_scopes)
        except (ValueError, KeyError, TypeError) as e:
            raise AuthError(f"Malformed service account credentials: {e}") from e
        logger.info("loaded service account credentials for %s",
                    getattr(creds, "service_account_email", "<unknown>"))
        return cls(creds)

    @classmethod
    def from_service_account_bytes(cls, data: bytes|str, scopes: str|Iterable[str] = "sheets"):
        """
        Credentials from the raw contents of a service account key file.
        """
        try:
            info = json.loads(data)
        except ValueError as e:
            raise AuthError(f"Service account credentials are not valid JSON: {e}") from e
        if not isinstance(info, dict):
            raise AuthError("Service account credentials must be a JSON object")
        return cls.from_service_account_info(info, scopes)

    @classmethod
    def from_service_account_file(cls, path: Path|str, scopes: str|Iterable[str] = "sheets"):
        """
        Credentials from a service account key file on disk.
        Everything is checked locally, nothing touches the network here.
        """
        p = path if isinstance(path, Path) else Path(str(path))
        try:
            data = p.read_bytes()
        except OSError as e:
            raise AuthError(f"Cannot read service account credentials {p}: {e}") from e
        return cls.from_service_account_bytes(data, scopes)

    @property
    def creds(self) -> service_account.Credentials:
        return self._creds

    @property
    def scopes(self) -> list[str]:
        return list(self._creds.scopes or [])

    @property
    def services(self) -> dict[str,Resource]:
        """
        Services built so far.  Can be empty.
        """
        return self._services

    def refresh(self) -> None:
        """
        Force a token exchange now rather than on the first request.
        """
        try:
            self._creds.refresh(Request())
        except google.auth.exceptions.RefreshError as e:
            raise AuthError(f"Failed to obtain an access token: {e}") from e

    def get_service(self, name: str = "sheets", version: str = "v4") -> Resource:
        """
        Build the requested service if not already available.
        """
        id = f'{name}:{version}'
        s = self._services.get(id, None)
        if s is None:
            logger.info("building %s service", id)
            s = build(name, version, credentials=self._creds,
                      cache=self._discovery_cache)
            self._services[id] = s
        return s
