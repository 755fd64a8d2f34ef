import re

import pytest

class _Call():
    """Stands in for an HttpRequest, execute() runs the fake handler."""
    def __init__(self, fn, **kwargs):
        self._fn = fn
        self._kwargs = kwargs

    def execute(self):
        return self._fn(**self._kwargs)

class FakeSheetsService():
    """
    Enough of the Sheets v4 discovery service to hold values in memory.
    Every value goes in and comes back as-is, no USER_ENTERED parsing.
    Ranges are either a bare sheet title, a single top left cell like 'A1'
    or 'Title'!A1:B2.
    """
    _RANGE_RE = re.compile(r"^(?:'?(?P<sheet>[^'!]+)'?!)?(?P<c1>[A-Z]+)(?P<r1>\d+)(?::(?P<c2>[A-Z]+)(?P<r2>\d+))?$")

    def __init__(self, spreadsheet_id: str = "ss-1", sheets: list[str] = ["Sheet1"]):
        self.spreadsheet_id = spreadsheet_id
        self.titles = list(sheets)
        self.grid = {t: [] for t in self.titles}
        self.batch_bodies = []

    # discovery shape
    def spreadsheets(self):
        return self

    def values(self):
        return _Values(self)

    def get(self, spreadsheetId, includeGridData=False, **kwargs):
        return _Call(self._get_spreadsheet, spreadsheetId=spreadsheetId)

    def batchUpdate(self, spreadsheetId, body):
        return _Call(self._batch_update, spreadsheetId=spreadsheetId, body=body)

    # handlers
    @staticmethod
    def _col(letters: str) -> int:
        n = 0
        for ch in letters:
            n = n * 26 + (ord(ch) - ord('A') + 1)
        return n - 1

    def _parse(self, range: str):
        if range in self.grid:
            return range, None
        m = self._RANGE_RE.match(range)
        assert m, f"fake cannot parse {range}"
        sheet = m.group("sheet") or self.titles[0]
        r1, c1 = int(m.group("r1")) - 1, self._col(m.group("c1"))
        r2 = int(m.group("r2")) if m.group("r2") else None
        c2 = self._col(m.group("c2")) + 1 if m.group("c2") else None
        return sheet, (r1, c1, r2, c2)

    def _get_spreadsheet(self, spreadsheetId):
        return {
            "spreadsheetId": spreadsheetId,
            "properties": {"title": "fake"},
            "sheets": [{"properties": {"sheetId": 100 + i, "title": t, "index": i,
                                       "sheetType": "GRID",
                                       "gridProperties": {"rowCount": 1000, "columnCount": 26}}}
                       for i, t in enumerate(self.titles)],
        }

    def _batch_update(self, spreadsheetId, body):
        self.batch_bodies.append(body)
        return {"spreadsheetId": spreadsheetId, "replies": [{} for _ in body["requests"]]}

    def _values_get(self, spreadsheetId, range, **kwargs):
        sheet, box = self._parse(range)
        rows = self.grid[sheet]
        r1, c1, r2, c2 = box if box else (0, 0, None, None)
        out = [row[c1:c2] for row in rows[r1:r2]]
        while out and not out[-1]:
            out.pop()
        response = {"range": range, "majorDimension": "ROWS"}
        if out:
            response["values"] = out
        return response

    def _values_update(self, spreadsheetId, range, valueInputOption, body):
        sheet, box = self._parse(range)
        rows = self.grid[sheet]
        r1, c1 = (box[0], box[1]) if box else (0, 0)
        for i, vals in enumerate(body["values"]):
            while len(rows) <= r1 + i:
                rows.append([])
            row = rows[r1 + i]
            while len(row) < c1 + len(vals):
                row.append("")
            row[c1:c1 + len(vals)] = list(vals)
        return {"spreadsheetId": spreadsheetId, "updatedRange": range,
                "updatedRows": len(body["values"])}

    def _values_append(self, spreadsheetId, range, valueInputOption, insertDataOption, body):
        sheet, _ = self._parse(range)
        rows = self.grid[sheet]
        table = f"{sheet}!A1:A{len(rows)}" if rows else ""
        rows.extend([list(v) for v in body["values"]])
        return {"spreadsheetId": spreadsheetId, "tableRange": table,
                "updates": {"spreadsheetId": spreadsheetId,
                            "updatedRange": f"{sheet}!A{len(rows)}",
                            "updatedRows": len(body["values"])}}

class _Values():
    def __init__(self, service: FakeSheetsService):
        self._service = service

    def get(self, **kwargs):
        return _Call(self._service._values_get, **kwargs)

    def update(self, **kwargs):
        return _Call(self._service._values_update, **kwargs)

    def append(self, **kwargs):
        return _Call(self._service._values_append, **kwargs)

@pytest.fixture
def fake_service():
    return FakeSheetsService(sheets=["Sheet1", "Sheet2"])
