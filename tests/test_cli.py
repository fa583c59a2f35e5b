import json

import pytest

from memodate_cli.cli import entrance

NOW = ["--now", "2024-01-01T10:00:00", "--no-english"]


def test_json_output(capsys):
    assert entrance(["내일 오후 3시", "--json"] + NOW) == 0
    records = json.loads(capsys.readouterr().out)
    assert records == [{"text": "내일 오후 3시", "startDate": "2024-01-02T15:00:00", "index": 0}]


def test_plain_output(capsys):
    entrance(["회의 3일 후"] + NOW)
    assert capsys.readouterr().out == "3\t2024-01-04T09:00:00\t3일 후\n"


def test_check(capsys):
    assert entrance(["모레", "--check"] + NOW) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert entrance(["메모", "--check"] + NOW) == 1
    assert capsys.readouterr().out.strip() == "false"


def test_no_numeric(capsys):
    entrance(["v1.2", "--json", "--no-numeric"] + NOW)
    assert json.loads(capsys.readouterr().out) == []


def test_bad_now():
    with pytest.raises(SystemExit):
        entrance(["내일", "--now", "tomorrow"])
