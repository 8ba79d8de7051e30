from datetime import datetime, timezone
from typing import Iterable, Optional

from sales_report.models import Transaction


class TransactionStore:
    """Process-wide holder of the ingested transactions.

    The collection is an immutable tuple that ``replace`` swaps in with a
    single assignment, so a reader holding a snapshot always sees one whole
    collection, never a mix of the old and the new one.
    """

    def __init__(self) -> None:
        self._records: tuple[Transaction, ...] = ()
        self.loaded_at: Optional[datetime] = None

    # ── writes ────────────────────────────────────────────────────────────────

    def replace(self, records: Iterable[Transaction]) -> None:
        self._records = tuple(records)
        self.loaded_at = datetime.now(timezone.utc)

    def clear(self) -> None:
        self._records = ()
        self.loaded_at = None

    # ── reads ─────────────────────────────────────────────────────────────────

    def snapshot(self) -> tuple[Transaction, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)


# module-level singleton used by the app
store = TransactionStore()
