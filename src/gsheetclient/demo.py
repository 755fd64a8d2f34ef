"""
Demo run against the spreadsheet named by SPREAD_SHEET_ID using the service
account key in ./secret.json.  Any failure ends the run with a traceback.
"""
import logging

from .config import ClientConfig
from .sheets import GoogleSheetsClient, GridRange, CellFormat, Color

logger = logging.getLogger(__name__)

def run(client: GoogleSheetsClient, sheet_name: str) -> list[list]:
    """
    The fixed sequence: write a block, append a row, colour some cells,
    read a range back and put a dropdown on the coloured cells.
    Returns the rows read back.
    """
    sheet_id = client.sheet_id(sheet_name)
    logger.info("%s is sheet %d", sheet_name, sheet_id)

    client.update("A1", [
        ["aaa", "bbb"],
        ["ccc", "ddd"],
    ])
    client.append([["1"]], sheet_name)

    target = GridRange(sheetId=sheet_id,
                       startRowIndex=2, endRowIndex=4,
                       startColumnIndex=1, endColumnIndex=3)
    client.format(target, CellFormat(backgroundColor=Color(red=1.0)))

    rows = client.get(f"'{sheet_name}'!A1:B1")
    for row in rows:
        print(row)

    client.set_list_validation(target, ["○", "×"])
    return rows

def main(config: ClientConfig|None = None) -> None:
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    cfg = config if config is not None else ClientConfig.from_env()
    client = GoogleSheetsClient.from_credentials(cfg.credentials_path, cfg.spreadsheet_id,
                                                 cfg.scopes, cfg.default_sheet)
    run(client, cfg.default_sheet)
