from pathlib import Path

import pytest

from gsheetclient import ClientConfig, SheetsClientError

def test_from_env():
    cfg = ClientConfig.from_env({"SPREAD_SHEET_ID": "abc123"})
    assert(cfg)
    assert(cfg.spreadsheet_id == "abc123")
    assert(cfg.credentials_path == Path("secret.json"))
    assert(cfg.scopes == ["sheets"])
    assert(cfg.default_sheet == "シート1")

def test_from_env_missing():
    with pytest.raises(SheetsClientError):
        ClientConfig.from_env({})

def test_from_env_overrides():
    cfg = ClientConfig.from_env({"SPREAD_SHEET_ID": "abc123"}, credentials_path="/keys/robot.json")
    assert(cfg.credentials_path == Path("/keys/robot.json"))

def test_config_dict():
    cfg = ClientConfig("abc123")
    cfg.config = {'scopes': 'sheets-ro', 'default_sheet': 'Data'}
    assert(cfg.config == {
        'spreadsheet_id': 'abc123',
        'credentials': 'secret.json',
        'scopes': ['sheets-ro'],
        'default_sheet': 'Data'
    })
    other = ClientConfig()
    assert(not other)
    other.config = cfg.config
    assert(other == cfg)
