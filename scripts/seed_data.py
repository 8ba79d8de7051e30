"""
Deterministic test-data generator.

Produces:
  - 120 product transactions spread over 2021 and 2022 (every month present)
  - 4 categories: men's clothing, women's clothing, jewelery, electronics
  - prices from 0 to ~1500, whole and fractional, so every bar chart
    range gets some items
  - ~60 % marked as sold

Run ``python -m scripts.seed_data > transactions.json`` to get the same
dataset in the wire format served by the remote source.
"""

import json
import random
from datetime import datetime, timedelta, timezone

from sales_report.models import Transaction
from sales_report.store import TransactionStore

SEED = 42
START = datetime(2021, 1, 1, tzinfo=timezone(timedelta(hours=5, minutes=30)))
END   = datetime(2022, 12, 31, 23, 59, 59, tzinfo=START.tzinfo)

CATEGORIES = ["men's clothing", "women's clothing", "jewelery", "electronics"]

# (adjective, noun) pools per category, for titles that search can hit
_NAMES = {
    "men's clothing":   (["Slim", "Casual", "Premium"], ["Jacket", "T-Shirt", "Backpack"]),
    "women's clothing": (["Rain", "Cotton", "Biker"],   ["Jacket", "Top", "Dress"]),
    "jewelery":         (["Silver", "Gold", "Rose"],    ["Bracelet", "Ring", "Earrings"]),
    "electronics":      (["Portable", "Gaming", "Ultra"], ["SSD", "Monitor", "Hard Drive"]),
}


def _rand_dt(rng: random.Random, lo: datetime = START, hi: datetime = END) -> datetime:
    delta = hi - lo
    secs = rng.randint(0, int(delta.total_seconds()))
    return lo + timedelta(seconds=secs)


def build_transactions(count: int = 120, seed: int = SEED) -> list[Transaction]:
    rng = random.Random(seed)
    records: list[Transaction] = []
    for idx in range(1, count + 1):
        category = rng.choice(CATEGORIES)
        adjectives, nouns = _NAMES[category]
        title = f"{rng.choice(adjectives)} {rng.choice(nouns)}"
        # every fourth price is whole, the rest carry cents
        if idx % 4 == 0:
            price = float(rng.randint(0, 1500))
        else:
            price = round(rng.uniform(0, 1500), 2)
        # force the first twelve records into distinct months
        sold_at = _rand_dt(rng)
        if idx <= 12:
            sold_at = sold_at.replace(month=idx, day=min(sold_at.day, 28))
        records.append(Transaction(
            id=idx,
            title=title,
            description=f"{title} from our {category} collection",
            price=price,
            category=category,
            date_of_sale=sold_at,
            sold=rng.random() < 0.6,
            image=f"https://example.com/img/{idx}.jpg",
        ))
    return records


def seed(store: TransactionStore) -> None:
    store.replace(build_transactions())


if __name__ == "__main__":
    payload = [t.model_dump(mode="json", by_alias=True) for t in build_transactions()]
    print(json.dumps(payload, indent=2))
