import pytest

from calc_report.core.exceptions import InvalidInputError
from calc_report.services.calculator import CalculatorError, CalculatorService
from calc_report.services.processor import process_operations


def as_pairs(entries):
    return [(entry.name, entry.value) for entry in entries]


def test_results_are_sorted_ascending() -> None:
    data = {
        "big": {"operator": "mul", "value1": 10, "value2": 10},
        "neg": {"operator": "sub", "value1": 1, "value2": 5},
        "root": {"operator": "sqrt", "value1": 9},
    }

    results = process_operations(data)

    assert as_pairs(results) == [("neg", -4.0), ("root", 3.0), ("big", 100.0)]


def test_equal_values_keep_input_order() -> None:
    data = {
        "c": {"operator": "add", "value1": 1, "value2": 1},
        "a": {"operator": "mul", "value1": 1, "value2": 2},
        "low": {"operator": "sub", "value1": 0, "value2": 1},
        "b": {"operator": "sqrt", "value1": 4},
    }

    results = process_operations(data)

    assert [entry.name for entry in results] == ["low", "c", "a", "b"]


def test_result_names_match_input_keys() -> None:
    data = {f"op{i}": {"operator": "add", "value1": i % 3, "value2": 0} for i in range(20)}

    results = process_operations(data)

    names = [entry.name for entry in results]
    assert sorted(names) == sorted(data)
    assert len(names) == len(set(names))


def test_empty_object_is_rejected() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        process_operations({})

    assert excinfo.value.message == "The JSON object is empty."


@pytest.mark.parametrize("data", [[], [{"operator": "add"}], "text", 3, None])
def test_non_object_document_is_rejected(data) -> None:
    with pytest.raises(InvalidInputError):
        process_operations(data)


def test_first_failure_aborts_the_batch() -> None:
    calls = []

    class RecordingCalculator(CalculatorService):
        def evaluate(self, operator_name, value1, value2=0.0):
            calls.append(operator_name)
            return super().evaluate(operator_name, value1, value2)

    data = {
        "ok": {"operator": "add", "value1": 1, "value2": 1},
        "bad": {"operator": "div", "value1": 1, "value2": 1},
        "never": {"operator": "mul", "value1": 1, "value2": 1},
    }

    with pytest.raises(CalculatorError) as excinfo:
        process_operations(data, RecordingCalculator())

    assert excinfo.value.message == "Unsupported operation type: div"
    assert calls == ["add", "div"]


def test_parse_failure_aborts_the_batch() -> None:
    data = {
        "ok": {"operator": "add", "value1": 1, "value2": 1},
        "broken": {"operator": "add", "value1": 1},
    }

    with pytest.raises(InvalidInputError) as excinfo:
        process_operations(data)

    assert excinfo.value.details["operation"] == "broken"
