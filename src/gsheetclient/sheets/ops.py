"""
One function per Sheets API call.  Each takes the discovery service as its
first argument, builds the request and returns the response as the matching
resource class.  HttpError from execute() is left to propagate.
"""
import logging

from googleapiclient.discovery import Resource

from .resources import *
from .requests import GoogleSheetsUpdateRequest, GoogleSheetsUpdateRequestResponse

logger = logging.getLogger(__name__)

def get(service: Resource, spreadsheetId: str,
        ranges: list[str]|None = None,
        includeGridData: bool = False) -> Spreadsheet:
    """
    Wrapper for calling the get() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/get
    This is for retrieving spreadsheet properties but can also include data
    if you need it.
    """
    logger.debug("spreadsheets.get %s", spreadsheetId)
    kwargs = {'spreadsheetId': spreadsheetId, 'includeGridData': includeGridData}
    if ranges:
        kwargs['ranges'] = [str(r) for r in ranges]
    response = service.spreadsheets().get(**kwargs).execute()
    return Spreadsheet.from_base(response)

def batchUpdate(service: Resource, spreadsheetId: str,
                request: GoogleSheetsUpdateRequest|dict) -> GoogleSheetsUpdateRequestResponse:
    """
    Wrapper for calling the batchUpdate() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate
    This is for formatting, validation and any other spreadsheet properties,
    not cell values which go through the values() resource.
    """
    body = request.to_base() if isinstance(request, GoogleSheetsUpdateRequest) else request
    logger.debug("spreadsheets.batchUpdate %s: %d request(s)", spreadsheetId, len(body.get('requests', [])))
    response = service.spreadsheets().batchUpdate(spreadsheetId=spreadsheetId, body=body).execute()
    return GoogleSheetsUpdateRequestResponse.from_base(response)

def getValues(service: Resource, spreadsheetId: str, range: str,
              dimension: str = "ROWS",
              valueRenderOption: str = "FORMATTED") -> list[list]:
    """
    Wrapper for calling the get() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/get
    Empty trailing rows and columns are not returned, and a range with no
    data at all gives an empty list.
    """
    dim = GoogleSheetsEnum.dimension(dimension)
    if not dim:
        raise ValueError(f"Invalid majorDimension value: {dimension}")
    value_render = GoogleSheetsEnum.valueRenderOption(valueRenderOption)
    if not value_render:
        raise ValueError(f"Invalid valueRenderOption value: {valueRenderOption}")
    logger.debug("spreadsheets.values.get %s %s", spreadsheetId, range)
    r = service.spreadsheets().values().get(spreadsheetId=spreadsheetId,
                                            range=str(range),
                                            majorDimension=dim,
                                            valueRenderOption=value_render).execute()
    return ValueRange.from_base(r).values

def updateValues(service: Resource, spreadsheetId: str, range: str,
                 values: list[list],
                 valueInputOption: str = "USER") -> UpdateValuesResponse:
    """
    Wrapper for calling the update() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/update
    Overwrites the range.  With USER_ENTERED the service parses strings as if
    typed in, so "1" can come back as a number.
    """
    value_input = GoogleSheetsEnum.valueInputOption(valueInputOption)
    if not value_input:
        raise ValueError(f"Invalid valueInputOption value: {valueInputOption}")
    logger.debug("spreadsheets.values.update %s %s", spreadsheetId, range)
    body = {"values": [list(row) for row in values]}
    r = service.spreadsheets().values().update(spreadsheetId=spreadsheetId,
                                               range=str(range),
                                               valueInputOption=value_input,
                                               body=body).execute()
    return UpdateValuesResponse.from_base(r)

def appendValues(service: Resource, spreadsheetId: str, range: str,
                 values: list[list],
                 valueInputOption: str = "USER",
                 insertDataOption: str = "INSERT_ROWS") -> AppendValuesResponse:
    """
    Wrapper for calling the append() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append
    The service finds the table in range and writes after its last row.
    INSERT_ROWS inserts new rows for the data rather than writing over
    whatever is below the table.
    """
    value_input = GoogleSheetsEnum.valueInputOption(valueInputOption)
    if not value_input:
        raise ValueError(f"Invalid valueInputOption value: {valueInputOption}")
    insert_data = GoogleSheetsEnum.insertDataOption(insertDataOption)
    if not insert_data:
        raise ValueError(f"Invalid insertDataOption value: {insertDataOption}")
    logger.debug("spreadsheets.values.append %s %s", spreadsheetId, range)
    body = {"values": [list(row) for row in values]}
    r = service.spreadsheets().values().append(spreadsheetId=spreadsheetId,
                                               range=str(range),
                                               valueInputOption=value_input,
                                               insertDataOption=insert_data,
                                               body=body).execute()
    return AppendValuesResponse.from_base(r)
