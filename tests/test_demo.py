from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from gsheetclient import GoogleSheetsClient, SheetNotFoundError
from gsheetclient.demo import run

def test_demo_sequence(fake_service, capsys):
    fake_service.titles = ["シート1"]
    fake_service.grid = {"シート1": []}
    client = GoogleSheetsClient(fake_service, "ss-1", "シート1")
    rows = run(client, "シート1")
    assert(rows == [["aaa", "bbb"]])
    assert(fake_service.grid["シート1"] == [["aaa", "bbb"], ["ccc", "ddd"], ["1"]])
    assert("['aaa', 'bbb']" in capsys.readouterr().out)
    fmt, validation = [b["requests"][0]["repeatCell"] for b in fake_service.batch_bodies]
    assert(fmt["range"] == validation["range"] == {
        "sheetId": 100, "startRowIndex": 2, "endRowIndex": 4,
        "startColumnIndex": 1, "endColumnIndex": 3})
    assert(fmt["fields"] == "userEnteredFormat(backgroundColor)")
    assert(validation["fields"] == "dataValidation")

def test_demo_stops_on_missing_sheet(fake_service):
    client = GoogleSheetsClient(fake_service, "ss-1")
    with pytest.raises(SheetNotFoundError):
        run(client, "シート1")
    assert(fake_service.grid["Sheet1"] == [])

def test_demo_stops_on_first_error():
    service = MagicMock()
    service.spreadsheets().get().execute.return_value = {
        "spreadsheetId": "ss-1",
        "sheets": [{"properties": {"sheetId": 0, "title": "シート1", "index": 0}}]}
    service.spreadsheets().values().update().execute.side_effect = HttpError(
        httplib2.Response({"status": 403}), b'{"error": {"code": 403, "message": "denied"}}')
    client = GoogleSheetsClient(service, "ss-1")
    with pytest.raises(HttpError):
        run(client, "シート1")
    service.spreadsheets().values().append.assert_not_called()
    service.spreadsheets().batchUpdate.assert_not_called()
