import pytest

from frametour.lessons import ExamplesLesson


def test_load_and_clean(run_step):
    dtypes = run_step(ExamplesLesson, "load_and_clean")
    assert dtypes["region"] == "category"
    assert dtypes["product"] == "category"


def test_enriched(run_step):
    result = run_step(ExamplesLesson, "enriched")
    assert result.columns.tolist() == ["order_id", "product", "region", "manager", "discount_pct"]
    assert result["manager"].notna().all()
    assert result["discount_pct"].between(-10, 10).all()


def test_monthly_revenue(run_step, data):
    result = run_step(ExamplesLesson, "monthly_revenue")
    assert result.index.tolist() == ["2024-01", "2024-02", "2024-03", "2024-04"]
    assert result.to_numpy().sum() == pytest.approx(data.sales()["total"].sum(), abs=0.1)


def test_top_products(run_step):
    result = run_step(ExamplesLesson, "top_products")
    assert len(result) == 3
    assert result["rank"].tolist() == [1, 2, 3]
    assert result["revenue"].is_monotonic_decreasing


def test_report(run_step, data):
    report = run_step(ExamplesLesson, "report")
    sales = data.sales()
    assert report["orders"] == len(sales)
    assert report["revenue"] == pytest.approx(sales["total"].sum(), abs=0.01)
    assert report["best_region"] == sales.groupby("region")["total"].sum().idxmax()
    assert sorted(report["revenue_by_manager"].index) == ["Emma", "Liam", "Noah", "Olivia"]
