"""Tests for calculation history storage."""

from datetime import date, datetime, timedelta

import pytest

from rescisao.sdk import history
from rescisao.sdk.schemas import TerminationCase
from rescisao.sdk.severance import compute_severance


def make_case(salary: float = 3000.00, name: str = None) -> TerminationCase:
    return TerminationCase(
        salary=salary,
        admission_date=date(2020, 1, 10),
        termination_date=date(2023, 1, 10),
        cause="without_cause",
        employee_name=name,
    )


def save(salary: float, saved_at: datetime):
    case = make_case(salary)
    return history.save_history_item(case, compute_severance(case), saved_at=saved_at)


def test_empty_history():
    assert history.load_history() == []


def test_save_and_get_round_trip():
    case = make_case(name="Maria Souza")
    result = compute_severance(case)
    item = history.save_history_item(case, result)

    assert len(item.id) == 8
    loaded = history.get_history_item(item.id)
    assert loaded.case == case
    assert loaded.result == result


def test_newest_first_and_capped():
    start = datetime(2024, 1, 1, 9, 0, 0)
    for i in range(history.MAX_HISTORY_ITEMS + 3):
        save(1000.00 + i, start + timedelta(minutes=i))

    items = history.load_history()
    assert len(items) == history.MAX_HISTORY_ITEMS
    # Newest (last saved) first; the three oldest were evicted
    assert items[0].case.salary == 1000.00 + history.MAX_HISTORY_ITEMS + 2
    assert items[-1].case.salary == 1003.00


def test_same_case_saved_twice_in_one_second_gets_distinct_ids():
    saved_at = datetime(2024, 1, 1, 9, 0, 0)
    first = save(2000.00, saved_at)
    second = save(2000.00, saved_at)

    assert first.id != second.id
    assert history.get_history_item(first.id).id == first.id
    assert history.get_history_item(second.id).id == second.id


def test_missing_item_raises():
    with pytest.raises(history.HistoryItemNotFoundError):
        history.get_history_item("deadbeef")


def test_clear():
    save(2000.00, datetime(2024, 1, 1))
    save(2500.00, datetime(2024, 1, 2))
    assert history.clear_history() == 2
    assert history.load_history() == []


def test_corrupt_file_loads_as_empty():
    history.get_history_path().write_text("{not json")
    assert history.load_history() == []

    # Next save replaces it
    save(2000.00, datetime(2024, 1, 1))
    assert len(history.load_history()) == 1
