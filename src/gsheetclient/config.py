import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import SheetsClientError

SPREADSHEET_ID_ENV = "SPREAD_SHEET_ID"
DEFAULT_CREDENTIALS = Path("secret.json")
DEFAULT_SHEET = "シート1"

@dataclass
class ClientConfig():
    """
    Everything needed to stand up a client: where the service account key
    lives, which scopes to ask for and which spreadsheet to talk to.
    default_sheet is where append() lands when no range is given.
    """
    spreadsheet_id: str = field(default="")
    credentials_path: Path|str = field(default=DEFAULT_CREDENTIALS)
    scopes: list[str] = field(default_factory=lambda: ["sheets"])
    default_sheet: str = field(default=DEFAULT_SHEET)

    def __post_init__(self) -> None:
        self.credentials_path = Path(self.credentials_path)

    def __bool__(self) -> bool:
        return bool(self.spreadsheet_id)

    @classmethod
    def from_env(cls, environ: Mapping[str, str]|None = None, **kwargs) -> "ClientConfig":
        """
        Pick up the spreadsheet ID from the environment.
        Anything else can be overridden with keyword arguments.
        """
        env = os.environ if environ is None else environ
        spreadsheet_id = env.get(SPREADSHEET_ID_ENV, "")
        if not spreadsheet_id:
            raise SheetsClientError(f"{SPREADSHEET_ID_ENV} is not set")
        return cls(spreadsheet_id=spreadsheet_id, **kwargs)

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for pushing into a json, toml, ini, etc, file.
        """
        return {
            'spreadsheet_id': self.spreadsheet_id,
            'credentials': str(self.credentials_path),
            'scopes': list(self.scopes),
            'default_sheet': self.default_sheet
        }

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict, only keys present are applied.
        """
        v = config.get('spreadsheet_id', None)
        if v is not None:
            self.spreadsheet_id = str(v)
        v = config.get('credentials', None)
        if v is not None:
            self.credentials_path = Path(v)
        v = config.get('scopes', [])
        if v:
            self.scopes = [v] if isinstance(v, str) else list(v)
        v = config.get('default_sheet', None)
        if v is not None:
            self.default_sheet = str(v)
