"""Bulk load of the remote transaction document into the store."""
import logging
from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from sales_report.config import config
from sales_report.exceptions import IngestionError
from sales_report.models import Transaction
from sales_report.store import TransactionStore

logger = logging.getLogger(__name__)

_transactions_adapter = TypeAdapter(list[Transaction])


def fetch_transactions(client: httpx.Client, url: str) -> list[Transaction]:
    """Download and parse the transaction document at ``url``."""
    try:
        response = client.get(url)
        response.raise_for_status()
        return _transactions_adapter.validate_python(response.json())
    except httpx.HTTPError as exc:
        raise IngestionError(f"Could not fetch transactions from {url}: {exc}") from exc
    except ValidationError as exc:
        raise IngestionError(
            f"Malformed transaction document at {url}: {exc.error_count()} invalid field(s)"
        ) from exc
    except ValueError as exc:
        raise IngestionError(f"Transaction document at {url} is not valid JSON") from exc


def load(
    target: TransactionStore,
    client: httpx.Client,
    url: Optional[str] = None,
) -> int:
    """Replace the contents of ``target`` with the remote collection.

    The store is only touched once the whole document has been fetched and
    parsed; on any failure it keeps its previous contents and
    ``IngestionError`` is raised. Returns the number of records loaded.
    """
    url = url or config.SOURCE_URL
    logger.info("Loading transactions from %s", url)
    records = fetch_transactions(client, url)
    target.replace(records)
    logger.info("Loaded %d transactions", len(records))
    return len(records)
