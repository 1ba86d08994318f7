"""Tests for synthetic chart series."""

from datetime import date

import numpy as np
import pytest

from app.services import chart_data


@pytest.fixture
def rng():
    return np.random.default_rng(42)


class TestSparkline:
    def test_length_and_last_point(self, rng):
        data = chart_data.sparkline(120.0, 100.0, rng=rng)
        assert len(data) == 20
        assert data[-1] == 120.0

    def test_floor(self, rng):
        data = chart_data.sparkline(10.0, 100.0, rng=rng)
        assert all(price >= 60.0 for price in data[:-1])
        assert data[-1] == 10.0

    def test_reproducible_with_seed(self):
        first = chart_data.sparkline(50, 40, rng=np.random.default_rng(7))
        second = chart_data.sparkline(50, 40, rng=np.random.default_rng(7))
        assert first == second

    def test_no_points(self, rng):
        assert chart_data.sparkline(50, 40, points=0, rng=rng) == []


class TestPriceHistory:
    def test_weekly_points_up_to_today(self, rng):
        data = chart_data.price_history(200.0, 150.0, today=date(2026, 3, 10), rng=rng)

        assert len(data) == 50
        assert data[0]["date"] == "2025-03-01"
        assert data[-1]["date"] == "2026-03-08"
        assert data[-1]["price"] == 200.0

    def test_end_of_month(self, rng):
        data = chart_data.price_history(200.0, 150.0, today=date(2026, 3, 31), rng=rng)
        assert len(data) == 52

    def test_floor(self, rng):
        data = chart_data.price_history(10.0, 100.0, today=date(2026, 3, 10), rng=rng)
        assert all(point["price"] >= 70.0 for point in data[:-1])


class TestIntraday:
    def test_session(self, rng):
        data = chart_data.intraday(100.0, 1.5, rng=rng)

        assert len(data) == 78
        assert data[0]["time"] == "09:00"
        assert data[12]["time"] == "10:00"
        assert data[-1] == {"time": "15:25", "price": 100.0}

    def test_clamped_around_base(self, rng):
        data = chart_data.intraday(100.0, -4.0, rng=rng)
        assert all(95.0 <= point["price"] <= 105.0 for point in data)


class TestPortfolioHistory:
    def test_thirteen_months(self, rng):
        data = chart_data.portfolio_history(50000.0, today=date(2026, 3, 10), rng=rng)

        assert len(data) == 13
        assert data[0]["month"] == "Mar 25"
        assert data[-1] == {"month": "Mar 26", "value": 50000}

    def test_year_boundary_labels(self, rng):
        data = chart_data.portfolio_history(1000.0, today=date(2026, 1, 5), rng=rng)
        assert [p["month"] for p in data[-3:]] == ["Nov 25", "Dec 25", "Jan 26"]

    def test_floor(self, rng):
        data = chart_data.portfolio_history(1000.0, today=date(2026, 1, 5), rng=rng)
        assert all(point["value"] >= 648 for point in data)
