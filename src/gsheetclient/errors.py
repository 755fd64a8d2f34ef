"""
Exceptions raised by gsheetclient.

Failures from the Sheets service itself are not wrapped, they come back as the
API client's own HttpError.  RequestError is just a name for it so callers can
catch everything from this package without importing googleapiclient.
"""
from googleapiclient.errors import HttpError

RequestError = HttpError

class SheetsClientError(Exception):
    """Base class for errors raised locally by this package."""
    pass

class AuthError(SheetsClientError):
    """Credentials could not be loaded or a token could not be obtained."""
    pass

class SheetNotFoundError(SheetsClientError, KeyError):
    """
    No sheet with the requested title exists in the spreadsheet.
    Also a KeyError as it is a failed lookup by title.
    """
    def __init__(self, sheet_name: str, spreadsheet_id: str = "") -> None:
        self.sheet_name = sheet_name
        self.spreadsheet_id = spreadsheet_id
        super().__init__(f"sheet {sheet_name} is not found")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])
