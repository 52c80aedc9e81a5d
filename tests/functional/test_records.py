import pandas as pd
import pytest

from pointfree.functional.composition import pipe
from pointfree.functional.lists import pluck
from pointfree.functional.records import select_where, to_records


@pytest.fixture
def frame():
    return pd.DataFrame(
        {
            "symbol": ["AAPL", "MSFT", "GOOG"],
            "listed": [True, False, True],
        },
        index=[10, 20, 30],
    )


def test_to_records_drops_index(frame):
    assert to_records(frame) == [
        {"symbol": "AAPL", "listed": True},
        {"symbol": "MSFT", "listed": False},
        {"symbol": "GOOG", "listed": True},
    ]


def test_select_where_on_frame(frame):
    listed_symbols = pipe(select_where("listed", True), pluck("symbol"))
    assert listed_symbols(frame) == ["AAPL", "GOOG"]


def test_select_where_on_records():
    records = [{"kind": "a"}, {"kind": "b"}, {"kind": "a", "n": 2}]
    assert select_where("kind", "a")(records) == [{"kind": "a"}, {"kind": "a", "n": 2}]


def test_to_records_rejects_non_frames():
    with pytest.raises(TypeError, match="DataFrame"):
        to_records([{"a": 1}])
