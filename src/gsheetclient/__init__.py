"""
A thin wrapper around the Google Sheets v4 Python client for working with a
single spreadsheet through a service account.

Python dataclasses are used for the request resources and most of the logic
is translating between those and the raw dicts the API client wants.
Authentication, signing, transport and retries all belong to google-auth and
google-api-python-client.
"""

from .errors import SheetsClientError, AuthError, SheetNotFoundError, RequestError
from .access import GoogleSheetsAccess
from .config import ClientConfig
from .sheets import GoogleSheetsClient, GridRange, CellFormat, Color

__version__ = "0.1.0"
