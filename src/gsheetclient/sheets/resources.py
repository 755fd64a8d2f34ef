"""
Class implementations of sheets request resources.
As these are just logical groupings of data fields we use dataclasses
to implement.  dataclasses.asdict() gives the dict the request client needs
but there's no inverse, so dataclasses holding dataclasses convert any dict
they were given in fixup().
Only the resources this package sends or reads are implemented, and fields
left as None are never sent.
"""
from dataclasses import dataclass, field
from typing import List, ClassVar

from ..resources import SheetsResourceBase

class GoogleSheetsEnum():
    """
    An 'enum' in the sheets client is just a string so this is
    just to translate and validate input.
    """
    _VALID_VALUE_RENDER_OPTIONS = {
        "FORMATTED": "FORMATTED_VALUE",
        "FORMATTED_VALUE": "FORMATTED_VALUE",
        "UNFORMATTED": "UNFORMATTED_VALUE",
        "UNFORMATTED_VALUE": "UNFORMATTED_VALUE",
        "FORMULA": "FORMULA"
    }
    _VALID_DIMENSION_OPTIONS = {
        "ROWS": "ROWS",
        "R": "ROWS",
        "C": "COLUMNS",
        "COLS": "COLUMNS",
        "COLUMNS": "COLUMNS"
    }
    _VALID_VALUE_INPUT_OPTIONS = {
        "RAW": "RAW",
        "USER": "USER_ENTERED",
        "USER_ENTERED": "USER_ENTERED"
    }
    _VALID_INSERT_DATA_OPTIONS = {
        "INSERT": "INSERT_ROWS",
        "INSERT_ROWS": "INSERT_ROWS",
        "OVERWRITE": "OVERWRITE"
    }
    _VALID_CONDITION_TYPES = ['ONE_OF_LIST', 'ONE_OF_RANGE', 'NUMBER_BETWEEN',
                              'NUMBER_GREATER', 'NUMBER_LESS', 'TEXT_CONTAINS',
                              'TEXT_EQ', 'DATE_IS_VALID', 'BOOLEAN', 'BLANK',
                              'NOT_BLANK', 'CUSTOM_FORMULA']

    @classmethod
    def valueRenderOption(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/ValueRenderOption"""
        return cls._VALID_VALUE_RENDER_OPTIONS.get(str(option).upper(), "")

    @classmethod
    def dimension(cls, dim: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/Dimension"""
        return cls._VALID_DIMENSION_OPTIONS.get(str(dim).upper(), "")

    @classmethod
    def valueInputOption(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/ValueInputOption"""
        return cls._VALID_VALUE_INPUT_OPTIONS.get(str(option).upper(), "")

    @classmethod
    def insertDataOption(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append#InsertDataOption"""
        return cls._VALID_INSERT_DATA_OPTIONS.get(str(option).upper(), "")

    @classmethod
    def conditionType(cls, option: str) -> str:
        """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#ConditionType"""
        t = str(option).upper()
        return t if t in cls._VALID_CONDITION_TYPES else ""

@dataclass
class Color(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#color
    Channels are 0.0 - 1.0, a channel left as None is not sent.
    """
    red: float|None = field(default=None)
    green: float|None = field(default=None)
    blue: float|None = field(default=None)
    alpha: float|None = field(default=None)

    def fixup(self) -> None:
        for c in ('red', 'green', 'blue', 'alpha'):
            v = getattr(self, c)
            if v is not None and not 0.0 <= float(v) <= 1.0:
                raise ValueError(f"Color channel {c} out of range: {v}")

    def __bool__(self) -> bool:
        return any(getattr(self, c) is not None for c in ('red', 'green', 'blue', 'alpha'))

@dataclass
class NumberFormat(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#numberformat
    """
    type: str|None = field(default=None)
    pattern: str|None = field(default=None)

    valid_values: ClassVar[list[str]] = ['TEXT', 'NUMBER', 'PERCENT',
                                         'CURRENCY', 'DATE', 'TIME',
                                         'DATE_TIME', 'SCIENTIFIC']

    def __post_init__(self):
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.type) and self.type in self.valid_values

    def fixup(self) -> None:
        if self.type:
            t = str(self.type).upper()
            if t not in self.valid_values:
                raise ValueError('Invalid number format type: ' + t)
            self.type = t

@dataclass
class CellFormat(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#cellformat
    A sparse patch, only populated fields are applied.
    textFormat is left as a plain dict.
    """
    backgroundColor: Color|dict|None = field(default=None)
    numberFormat: NumberFormat|dict|None = field(default=None)
    horizontalAlignment: str|None = field(default=None)
    verticalAlignment: str|None = field(default=None)
    wrapStrategy: str|None = field(default=None)
    textFormat: dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if isinstance(self.backgroundColor, dict):
            self.backgroundColor = Color(**self.backgroundColor)
        if isinstance(self.numberFormat, dict):
            self.numberFormat = NumberFormat(**self.numberFormat)
        if self.backgroundColor is not None:
            self.backgroundColor.fixup()

    def __bool__(self) -> bool:
        return bool(self.set_fields())

@dataclass
class GridRange(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#gridrange
    Indexes are zero based and the end is exclusive.  None means unbounded.
    """
    sheetId: int = field(default=0)
    startRowIndex: int|None = field(default=None)
    endRowIndex: int|None = field(default=None)
    startColumnIndex: int|None = field(default=None)
    endColumnIndex: int|None = field(default=None)

    def __bool__(self) -> bool:
        return self.sheetId >= 0

@dataclass
class ValueRange(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values#resource:-valuerange"""
    range: str = field(default="")
    majorDimension: str = field(default="")
    values: list[list[bool|str|int|float]] = field(default_factory=list)

    def __post_init__(self):
        self.fixup()

    def fixup(self) -> None:
        if self.majorDimension:
            self.majorDimension = GoogleSheetsEnum.dimension(str(self.majorDimension))

    def __bool__(self) -> bool:
        return bool(self.range)

@dataclass
class UpdateValuesResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/UpdateValuesResponse
    """
    spreadsheetId: str = field(default="")
    updatedRange: str = field(default="")
    updatedRows: int = field(default=0)
    updatedColumns: int = field(default=0)
    updatedCells: int = field(default=0)
    updatedData: ValueRange|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.updatedData = self.updatedData if isinstance(self.updatedData,ValueRange) else ValueRange.from_base(self.updatedData)

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId) and bool(self.updatedRange)

@dataclass
class AppendValuesResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append#response-body
    tableRange is the range the new rows were appended after.
    """
    spreadsheetId: str = field(default="")
    tableRange: str = field(default="")
    updates: UpdateValuesResponse|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.updates = self.updates if isinstance(self.updates,UpdateValuesResponse) else UpdateValuesResponse.from_base(self.updates)

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

@dataclass
class ConditionValue(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#conditionvalue"""
    userEnteredValue: str|None = field(default=None)
    relativeDate: str|None = field(default=None)

@dataclass
class BooleanCondition(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#booleancondition"""
    type: str|None = field(default=None)
    values: List[ConditionValue|dict|str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if self.type:
            t = GoogleSheetsEnum.conditionType(self.type)
            if not t:
                raise ValueError(f"Invalid condition type: {self.type}")
            self.type = t
        self.values = [v if isinstance(v, ConditionValue) else
                       ConditionValue(userEnteredValue=v) if isinstance(v, str) else
                       ConditionValue(**dict(v)) for v in self.values]

@dataclass
class DataValidationRule(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#datavalidationrule"""
    condition: BooleanCondition|dict = field(default_factory=dict)
    inputMessage: str|None = field(default=None)
    strict: bool = field(default=False)
    showCustomUi: bool = field(default=False)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.condition = self.condition if isinstance(self.condition,BooleanCondition) else BooleanCondition(**dict(self.condition))

    @classmethod
    def one_of_list(cls, values: list[str], strict: bool = True, showCustomUi: bool = True):
        """A dropdown of literal values."""
        return cls(BooleanCondition('ONE_OF_LIST', [str(v) for v in values]),
                   strict=strict, showCustomUi=showCustomUi)

@dataclass
class CellData(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#celldata
    Only the writable parts used by repeatCell.
    """
    userEnteredFormat: CellFormat|dict|None = field(default=None)
    dataValidation: DataValidationRule|dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if isinstance(self.userEnteredFormat, dict):
            self.userEnteredFormat = CellFormat(**self.userEnteredFormat)
        if isinstance(self.dataValidation, dict):
            self.dataValidation = DataValidationRule(**self.dataValidation)

@dataclass
class GridProperties(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#gridproperties"""
    rowCount: int = field(default=-1)
    columnCount: int = field(default=-1)
    frozenRowCount: int = field(default=0)
    frozenColumnCount: int = field(default=0)
    hideGridlines: bool = field(default=False)
    rowGroupControlAfter: bool = field(default=False)
    columnGroupControlAfter: bool = field(default=False)

    def __bool__(self) -> bool:
        return self.rowCount >= 0 and self.columnCount >= 0

@dataclass
class SheetProperties(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheetproperties"""
    sheetId: int = field(default=-1)
    title: str = field(default="")
    index: int = field(default=-1)
    sheetType: str = field(default="")
    gridProperties: GridProperties|dict = field(default_factory=dict)
    hidden: bool = field(default=False)
    tabColor: dict = field(default_factory=dict)
    tabColorStyle: dict = field(default_factory=dict)
    rightToLeft: bool = field(default=False)
    dataSourceSheetProperties: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.gridProperties = self.gridProperties if isinstance(self.gridProperties,GridProperties) else GridProperties.from_base(self.gridProperties)

    def __bool__(self) -> bool:
        """
        True if the ID and index are 0 or positive
        """
        return self.sheetId >= 0 and self.index >= 0 and bool(self.title)

    def __str__(self) -> str:
        if not self:
            return "<invalid sheet>"
        val = f"{str(self.title)}({str(self.sheetId)}[{str(self.index)}])"
        if self.gridProperties:
            val += f"({self.gridProperties.rowCount}Rx{self.gridProperties.columnCount}C)"
        return val

@dataclass
class Sheet(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheet
    Only properties are modelled, everything else is kept raw.
    """
    properties: SheetProperties|dict = field(default_factory=dict)
    data: List[dict] = field(default_factory=list)
    merges: List[dict] = field(default_factory=list)
    conditionalFormats: List[dict] = field(default_factory=list)
    filterViews: List[dict] = field(default_factory=list)
    protectedRanges: List[dict] = field(default_factory=list)
    basicFilter: dict = field(default_factory=dict)
    charts: List[dict] = field(default_factory=list)
    bandedRanges: List[dict] = field(default_factory=list)
    developerMetadata: List[dict] = field(default_factory=list)
    rowGroups: List[dict] = field(default_factory=list)
    columnGroups: List[dict] = field(default_factory=list)
    slicers: List[dict] = field(default_factory=list)
    tables: List[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.properties = self.properties if isinstance(self.properties,SheetProperties) else SheetProperties.from_base(self.properties)

    def __bool__(self) -> bool:
        return bool(self.properties)

    def __str__(self) -> str:
        return str(self.properties)

@dataclass
class Spreadsheet(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets#resource:-spreadsheet
    Spreadsheet properties are kept as a raw dict, the sheets are what we need.
    """
    spreadsheetId: str = field(default="")
    properties: dict = field(default_factory=dict)
    sheets: List[Sheet|dict] = field(default_factory=list)
    namedRanges: List[dict] = field(default_factory=list)
    spreadsheetUrl: str = field(default="")
    developerMetadata: List[dict] = field(default_factory=list)
    dataSources: List[dict] = field(default_factory=list)
    dataSourceSchedules: List[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.sheets = [s if isinstance(s,Sheet) else Sheet.from_base(s) for s in self.sheets]

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def __str__(self) -> str:
        if not self.spreadsheetId:
            return 'unconnected'
        title = self.properties.get('title', self.spreadsheetId)
        return f"{title}[{','.join(str(s) for s in self.sheets)}]"

    @property
    def title(self) -> str:
        return self.properties.get('title', "")

    @property
    def titles(self) -> list[str]:
        return [s.properties.title for s in self.sheets]
