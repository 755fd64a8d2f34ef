from dataclasses import dataclass, field
from typing import List
import re

from ..resources import SheetsResourceBase
from .resources import CellData, GridRange, Spreadsheet

class GoogleSheetsUpdateRequestBase(SheetsResourceBase):
    """
    Base class for sheet batchUpdate requests to get the actual
    request dict into the right format.
    """
    def to_request(self) -> dict[str,dict]:
        name = self.__class__.__name__
        # strip off the trailing 'Request' and lower case the first letter,
        # RepeatCellRequest -> repeatCell
        m = re.match("^([a-zA-Z])([a-zA-Z]+)Request$", name)
        if not m:
            raise RuntimeError("Invalid Google Sheets request format for class name")
        key = m.group(1).lower() + m.group(2)
        return {key: self.trim()}

@dataclass
class RepeatCellRequest(GoogleSheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#repeatcellrequest
    Write the same cell to every cell in range.  Only what 'fields' names is
    touched, everything else on those cells is left alone.
    """
    range: GridRange|dict
    cell: CellData|dict
    fields: str

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.range = self.range if isinstance(self.range,GridRange) else GridRange(**dict(self.range))
        self.cell = self.cell if isinstance(self.cell,CellData) else CellData(**dict(self.cell))
        if not self.fields:
            raise ValueError("repeatCell requires a field mask")

@dataclass
class GoogleSheetsUpdateRequest(SheetsResourceBase):
    """
    Generate a GSheet Batch Update request body.
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#request-body
    """
    requests: List[GoogleSheetsUpdateRequestBase|dict]
    includeSpreadsheetInResponse: bool = field(default=False)
    responseRanges: List[str] = field(default_factory=list)
    responseIncludeGridData: bool = field(default=False)

    def to_base(self) -> dict:
        b = {
            'requests': [r.to_request() if isinstance(r, GoogleSheetsUpdateRequestBase) else dict(r)
                         for r in self.requests],
            'includeSpreadsheetInResponse': self.includeSpreadsheetInResponse,
            'responseIncludeGridData': self.responseIncludeGridData
        }
        if self.responseRanges:
            b['responseRanges'] = list(self.responseRanges)
        return b

def make_request(requests: list[GoogleSheetsUpdateRequestBase|dict],
                 includeSpreadsheetInResponse: bool = False,
                 responseRanges: list[str]|None = None,
                 responseIncludeGridData: bool = False) -> dict:
    """
    Convenience function to assemble the request body with the usual parameters.
    """
    return GoogleSheetsUpdateRequest(requests=requests,
                                     includeSpreadsheetInResponse=includeSpreadsheetInResponse,
                                     responseRanges=responseRanges or [],
                                     responseIncludeGridData=responseIncludeGridData).to_base()

@dataclass
class GoogleSheetsUpdateRequestResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#response-body
    """
    spreadsheetId: str = field(default="")
    replies: List[dict] = field(default_factory=list)
    updatedSpreadsheet: Spreadsheet|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def fixup(self) -> None:
        self.updatedSpreadsheet = self.updatedSpreadsheet if isinstance(self.updatedSpreadsheet,Spreadsheet) else Spreadsheet.from_base(self.updatedSpreadsheet)
