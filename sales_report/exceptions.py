"""Exception classes for the sales report service."""


class SalesReportError(Exception):
    """Base exception for the sales report service."""
    pass


class IngestionError(SalesReportError):
    """Fetching or parsing the remote transaction document failed."""
    pass


class CompositeError(SalesReportError):
    """One of the sections of the combined report could not be built."""
    pass
