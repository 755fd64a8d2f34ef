import logging
from collections.abc import Iterable
from pathlib import Path

from googleapiclient.discovery import Resource

from ..access import GoogleSheetsAccess
from ..config import DEFAULT_SHEET
from ..errors import SheetNotFoundError
from . import ops
from .resources import CellData, CellFormat, DataValidationRule, GridRange, Spreadsheet
from .resources import AppendValuesResponse, UpdateValuesResponse
from .requests import RepeatCellRequest, GoogleSheetsUpdateRequest, GoogleSheetsUpdateRequestResponse

logger = logging.getLogger(__name__)

class GoogleSheetsClient():
    """
    A handle on one spreadsheet.  Holds the Sheets service and the
    spreadsheet ID, neither of which change after construction.
    Every method is a single round trip, nothing is cached.

    The service is passed in so anything with the discovery client's shape
    will do, use from_credentials() to build the real one.
    """

    def __init__(self, service: Resource, spreadsheet_id: str,
                 default_sheet: str = DEFAULT_SHEET) -> None:
        self._service = service
        self._spreadsheet_id = spreadsheet_id
        self._default_sheet = default_sheet

    @classmethod
    def from_credentials(cls, credentials: Path|str|bytes, spreadsheet_id: str,
                         scopes: str|Iterable[str] = "sheets",
                         default_sheet: str = DEFAULT_SHEET):
        """
        Load a service account key (a path, or the raw bytes of the file) and
        build a client on it.  Raises AuthError if the key can't be used.
        """
        if isinstance(credentials, bytes):
            access = GoogleSheetsAccess.from_service_account_bytes(credentials, scopes)
        else:
            access = GoogleSheetsAccess.from_service_account_file(credentials, scopes)
        return cls(access.get_service("sheets", "v4"), spreadsheet_id, default_sheet)

    def __str__(self) -> str:
        return self._spreadsheet_id

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    @property
    def spreadsheet_id(self) -> str:
        return self._spreadsheet_id

    @property
    def service(self) -> Resource:
        return self._service

    @property
    def default_sheet(self) -> str:
        """Where append() writes when no range is given."""
        return self._default_sheet

    def get(self, range: str) -> list[list]:
        """
        Read one range, e.g. "'Sheet1'!A1:B1".  Rows of cells, or [] if the
        range holds nothing.
        https://developers.google.com/sheets/api/guides/values#reading_a_single_range
        """
        return ops.getValues(self._service, self._spreadsheet_id, range)

    def update(self, range: str, values: list[list],
               value_input_option: str = "USER_ENTERED") -> UpdateValuesResponse:
        """
        Overwrite a range.
        https://developers.google.com/sheets/api/guides/values#writing_to_a_single_range
        """
        return ops.updateValues(self._service, self._spreadsheet_id, range, values,
                                value_input_option)

    def append(self, values: list[list], range: str|None = None,
               value_input_option: str = "USER_ENTERED",
               insert_data_option: str = "INSERT_ROWS") -> AppendValuesResponse:
        """
        Add rows after the last populated row of range, or of the default
        sheet.  Rows are inserted, existing ones are never overwritten.
        https://developers.google.com/sheets/api/guides/values#appending_values
        """
        target = range if range else self._default_sheet
        return ops.appendValues(self._service, self._spreadsheet_id, target, values,
                                value_input_option, insert_data_option)

    @staticmethod
    def format_mask(cell_format: CellFormat) -> str:
        """
        Field mask covering exactly the populated fields of cell_format,
        e.g. 'userEnteredFormat(backgroundColor)'.
        """
        names = cell_format.set_fields()
        if not names:
            raise ValueError("Cell format has no fields set")
        return f"userEnteredFormat({','.join(names)})"

    def format(self, range: GridRange, cell_format: CellFormat,
               fields: str|None = None) -> GoogleSheetsUpdateRequestResponse:
        """
        Apply a format patch to every cell in range.  Only what the mask names
        is changed, by default the fields populated in cell_format.
        https://developers.google.com/sheets/api/samples/formatting
        """
        mask = fields if fields else self.format_mask(cell_format)
        request = RepeatCellRequest(range, CellData(userEnteredFormat=cell_format), mask)
        return self.batchUpdate(GoogleSheetsUpdateRequest([request]))

    def get_spreadsheet(self) -> Spreadsheet:
        """Spreadsheet metadata, no cell data."""
        return ops.get(self._service, self._spreadsheet_id)

    def sheet_id(self, sheet_name: str) -> int:
        """
        The numeric sheetId for a sheet title.  GridRange addresses sheets by
        this, not by title.
        """
        for s in self.get_spreadsheet().sheets:
            if s.properties.title == sheet_name:
                return s.properties.sheetId
        raise SheetNotFoundError(sheet_name, self._spreadsheet_id)

    def set_list_validation(self, range: GridRange, values: list[str],
                            strict: bool = True,
                            show_custom_ui: bool = True) -> GoogleSheetsUpdateRequestResponse:
        """
        Restrict every cell in range to one of values, shown as a dropdown.
        Replaces whatever validation was there.
        https://developers.google.com/sheets/api/guides/conditional-format#data_validation
        """
        rule = DataValidationRule.one_of_list(values, strict=strict, showCustomUi=show_custom_ui)
        request = RepeatCellRequest(range, CellData(dataValidation=rule), "dataValidation")
        return self.batchUpdate(GoogleSheetsUpdateRequest([request]))

    def batchUpdate(self, request: GoogleSheetsUpdateRequest|dict) -> GoogleSheetsUpdateRequestResponse:
        return ops.batchUpdate(self._service, self._spreadsheet_id, request)
