"""Synthetic price series for charts (sparklines, history, intraday).

These are display-only random walks anchored on known prices; nothing here
is used for analytics. Pass a seeded ``numpy.random.Generator`` for
reproducible output.
"""

from datetime import date
from typing import Dict, List, Optional, Union

import numpy as np

from app.utils.numbers import round_half_up

MONTH_LABELS = ["Jan", "Fev", "Mar", "Avr", "Mai", "Jun", "Jul", "Aou", "Sep", "Oct", "Nov", "Dec"]


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _shift_month(day: date, months_back: int) -> tuple:
    index = day.year * 12 + (day.month - 1) - months_back
    return index // 12, index % 12 + 1


def sparkline(
    current_price: float,
    buy_price: float,
    points: int = 20,
    rng: Optional[np.random.Generator] = None,
) -> List[float]:
    """Walk from the buy price to the current price in ``points`` steps."""
    if points <= 0:
        return []
    noise = (_rng(rng).random(points) - 0.5) * current_price * 0.04
    trend = (current_price - buy_price) / points
    floor = buy_price * 0.6

    data = []
    price = buy_price
    for step in noise:
        price = max(floor, price + trend + float(step))
        data.append(round(price, 2))

    data[-1] = current_price
    return data


def price_history(
    current_price: float,
    buy_price: float,
    months: int = 12,
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Dict[str, Union[str, float]]]:
    """Weekly points (days 1, 8, 15, 22) over the last ``months`` months."""
    today = today or date.today()
    rng = _rng(rng)
    trend = (current_price - buy_price) / (months * 30)
    floor = buy_price * 0.7

    data: List[Dict[str, Union[str, float]]] = []
    price = buy_price
    for months_back in range(months, -1, -1):
        year, month = _shift_month(today, months_back)
        for day in (1, 8, 15, 22):
            point_date = date(year, month, day)
            if point_date > today:
                break
            noise = (float(rng.random()) - 0.5) * current_price * 0.03
            price = max(floor, price + trend * 7 + noise)
            data.append({"date": point_date.isoformat(), "price": round(price, 2)})

    if data:
        data[-1]["price"] = current_price
    return data


def intraday(
    base_price: float,
    change_percent: float,
    points: int = 78,
    rng: Optional[np.random.Generator] = None,
) -> List[Dict[str, Union[str, float]]]:
    """5-minute session from 09:00 ending exactly on ``base_price``."""
    rng = _rng(rng)
    volatility = abs(change_percent) * 0.3 + 0.1
    price = base_price * (1 - change_percent / 100)

    data: List[Dict[str, Union[str, float]]] = []
    for i in range(points):
        total_minutes = i * 5
        time = f"{9 + total_minutes // 60:02d}:{total_minutes % 60:02d}"

        progress = i / (points - 1) if points > 1 else 1.0
        trend = (change_percent / 100) * base_price * progress
        noise = (float(rng.random()) - 0.5) * base_price * (volatility / 100)
        mean_reversion = (base_price + trend - price) * 0.05

        price = price + trend * (1 / points) + noise + mean_reversion
        price = min(max(price, base_price * 0.95), base_price * 1.05)
        if i == points - 1:
            price = base_price

        data.append({"time": time, "price": round(price, 2)})

    return data


def portfolio_history(
    total_value: float,
    months: int = 12,
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Dict[str, Union[str, int]]]:
    """Monthly values climbing from 72% of today's value; last point is exact."""
    today = today or date.today()
    rng = _rng(rng)
    start_value = total_value * 0.72
    trend = (total_value - start_value) / months

    data: List[Dict[str, Union[str, int]]] = []
    value = start_value
    for months_back in range(months, -1, -1):
        year, month = _shift_month(today, months_back)
        noise = (float(rng.random()) - 0.45) * total_value * 0.025
        value = max(start_value * 0.9, value + trend + noise)
        label = f"{MONTH_LABELS[month - 1]} {year % 100:02d}"
        data.append({"month": label, "value": round_half_up(value)})

    data[-1]["value"] = round_half_up(total_value)
    return data
