import pytest

from frametour.lessons import BasicsLesson


@pytest.mark.parametrize("name, rows", [("head", [0, 1, 2]), ("tail", [6, 7])])
def test_head_tail(run_step, name, rows):
    assert run_step(BasicsLesson, name).index.tolist() == rows


def test_describe(run_step):
    description = run_step(BasicsLesson, "describe")
    assert description.columns.tolist() == ["age", "salary"]
    assert description.loc["count"].tolist() == [7, 7]
    assert description.loc["max", "salary"] == 98000


def test_info(run_step):
    info = run_step(BasicsLesson, "info")
    assert info.index.tolist() == ["name", "age", "city", "department", "salary"]
    assert info["non_null"].tolist() == [8, 7, 8, 8, 7]
    assert (info["memory_bytes"] > 0).all()


def test_select_column(run_step):
    names = run_step(BasicsLesson, "select_column")
    assert names.name == "name"
    assert names.iloc[0] == "Alice"


def test_select_columns(run_step):
    assert run_step(BasicsLesson, "select_columns").columns.tolist() == ["city", "name"]


def test_loc_is_inclusive_and_iloc_is_not(run_step):
    by_label = run_step(BasicsLesson, "select_loc")
    by_position = run_step(BasicsLesson, "select_iloc")
    assert by_label.index.tolist() == [1, 2, 3]
    assert by_position.index.tolist() == [1, 2]
    assert by_position.columns.tolist() == ["name", "age"]


def test_scalar_access(run_step):
    assert run_step(BasicsLesson, "scalar_access") == {"at": "Charlie", "iat": "Charlie"}


def test_boolean_filter(run_step):
    assert run_step(BasicsLesson, "boolean_filter")["name"].tolist() == [
        "Charlie",
        "George",
        "Hannah",
    ]


def test_combined_filter(run_step):
    assert run_step(BasicsLesson, "combined_filter")["name"].tolist() == [
        "Alice",
        "Bob",
        "Charlie",
        "George",
    ]


def test_isin_filter(run_step):
    assert run_step(BasicsLesson, "isin_filter").index.tolist() == [1, 3, 4, 5, 7]


def test_query(run_step):
    assert run_step(BasicsLesson, "query")["name"].tolist() == ["Diana", "Hannah"]


def test_sort_values(run_step):
    result = run_step(BasicsLesson, "sort_values")
    assert result["name"].tolist() == [
        "Fiona",
        "Diana",
        "Charlie",
        "Alice",
        "George",
        "Hannah",
        "Bob",
        "Edward",
    ]


def test_sort_index(run_step):
    assert run_step(BasicsLesson, "sort_index").index.tolist() == [0, 1, 2]


def test_add_columns(run_step):
    result = run_step(BasicsLesson, "add_columns")
    assert result.columns.tolist() == ["name", "monthly_salary", "senior"]
    assert result.loc[0, "monthly_salary"] == pytest.approx(7083.33)
    assert result["senior"].tolist() == [False, False, True, False, False, False, True, True]


def test_drop_columns(run_step):
    assert run_step(BasicsLesson, "drop_columns").columns.tolist() == ["name", "age", "city"]
