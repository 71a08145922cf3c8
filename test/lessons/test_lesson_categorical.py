from frametour.lessons import CategoricalLesson, TextLesson


def test_convert(run_step):
    result = run_step(CategoricalLesson, "convert")
    assert result["dtype"] == "category"
    assert result["categories"] == ["Berlin", "London", "Paris"]


def test_codes(run_step):
    result = run_step(CategoricalLesson, "codes")
    assert result["code"].tolist() == [1, 2, 1, 0, 2, 0, 1, 2]


def test_ordered(run_step):
    result = run_step(CategoricalLesson, "ordered")
    assert result["sorted"].tolist() == ["small", "small", "medium", "medium", "large"]
    assert result["above_small"].tolist() == [True, False, True, False, True]


def test_memory(run_step):
    result = run_step(CategoricalLesson, "memory")
    assert result["category_bytes"] < result["object_bytes"]


def test_unused(run_step):
    assert run_step(CategoricalLesson, "unused").to_dict() == {
        "Berlin": 2,
        "London": 3,
        "Paris": 3,
        "Rome": 0,
    }


def test_rename(run_step):
    assert run_step(CategoricalLesson, "rename").to_dict() == {"Eng": 3, "Mkt": 2, "Sales": 3}


def test_normalize(run_step):
    result = run_step(TextLesson, "normalize")
    assert result["cleaned"].tolist() == ["laptop", "phone", "lamp", "desk", "laptop", "chair"]


def test_contains(run_step):
    assert run_step(TextLesson, "contains")["review_id"].tolist() == [101, 102]


def test_replace(run_step):
    result = run_step(TextLesson, "replace")
    assert result.iloc[0] == "Great laptop, FAST delivery! Order #****"
    assert not result.str.contains(r"#\d", regex=True).any()


def test_split(run_step):
    result = run_step(TextLesson, "split")
    assert result.columns.tolist() == ["first", "rest"]
    assert result.loc[0, "first"] == "Great laptop"
    assert result["rest"].isna().tolist() == [False, True, False, True, False, True]


def test_length(run_step):
    result = run_step(TextLesson, "length")
    assert result.loc[5, "length"] == len("Comfortable chair")


def test_extract(run_step):
    result = run_step(TextLesson, "extract")
    assert result.columns.tolist() == ["order_number"]
    assert result["order_number"].tolist()[:2] == ["1042", "1043"]
    assert result["order_number"].isna().tolist() == [False, False, True, False, True, True]
