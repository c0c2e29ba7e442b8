"""History tests: bounded, newest first, record round trip with sanitizing."""

import pandas as pd

from calculator import CalculationHistory, HistoryEntry, evaluate


def test_newest_first():
    history = CalculationHistory()
    history.add("1+1", "2", timestamp=1)
    history.add("2+2", "4", timestamp=2)
    assert [e.expression for e in history] == ["2+2", "1+1"]


def test_default_limit_is_fifty():
    history = CalculationHistory()
    for i in range(60):
        history.add(str(i), str(i), timestamp=i)
    assert len(history) == 50
    assert history.entries[0].expression == "59"
    assert history.entries[-1].expression == "10"


def test_custom_limit():
    history = CalculationHistory(max_items=2)
    for i in range(3):
        history.add(str(i), str(i))
    assert [e.expression for e in history] == ["2", "1"]


def test_timestamp_defaults_to_now_in_ms():
    entry = CalculationHistory().add("1", "1")
    assert entry.timestamp > 1_600_000_000_000


def test_only_successful_results_are_recorded():
    history = CalculationHistory()
    assert history.add_result(evaluate("1/0")) is None
    entry = history.add_result(evaluate("0.1+0.2"))
    assert entry.result == "0.30000000000000004"
    assert len(history) == 1


def test_clear():
    history = CalculationHistory()
    history.add("1", "1")
    history.clear()
    assert len(history) == 0
    assert history.to_records() == []


def test_records():
    history = CalculationHistory()
    history.add("2+3*4", "14", timestamp=1700000000000)
    assert history.to_records() == [{"expr": "2+3*4", "result": "14", "ts": 1700000000000}]


def test_from_records_skips_malformed():
    records = [
        {"expr": "1+1", "result": "2", "ts": 5},
        {"expr": 3, "result": "3", "ts": 1},
        "garbage",
        {"expr": "2*2", "result": "4", "ts": "not a number"},
        {"expr": "3*3", "result": None, "ts": 1},
        {"expr": "4*4", "result": "16"},
    ]
    history = CalculationHistory.from_records(records)
    assert history.entries == [
        HistoryEntry("1+1", "2", 5),
        HistoryEntry("2*2", "4", 0),
        HistoryEntry("4*4", "16", 0),
    ]


def test_from_records_non_list_gives_empty_history():
    assert len(CalculationHistory.from_records({"expr": "1"})) == 0
    assert len(CalculationHistory.from_records(None)) == 0


def test_from_records_truncates():
    records = [{"expr": str(i), "result": str(i), "ts": i} for i in range(80)]
    history = CalculationHistory.from_records(records)
    assert len(history) == 50
    assert history.entries[0].expression == "0"


def test_to_dataframe():
    history = CalculationHistory()
    history.add("1+1", "2", timestamp=0)
    df = history.to_dataframe()
    assert list(df.columns) == ["expr", "result", "ts"]
    assert df.loc[0, "ts"] == pd.Timestamp("1970-01-01")


def test_zero_limit_keeps_nothing():
    history = CalculationHistory(max_items=0)
    history.add("1+1", "2")
    assert len(history) == 0
    records = [{"expr": "1+1", "result": "2", "ts": 1}]
    assert len(CalculationHistory.from_records(records, max_items=0)) == 0


def test_storage_key_is_per_instance():
    assert CalculationHistory.storage_key(7) == "mod_scicalc_history_v1_7"
    assert CalculationHistory.storage_key("a") != CalculationHistory.storage_key("b")
