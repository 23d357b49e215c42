"""Domain exceptions for the history bounded context."""


class HistoryDomainError(Exception):
    """Base exception for history domain errors."""

    pass


class InvalidHistoryDataError(HistoryDomainError):
    """Raised when persisted or imported history data cannot be parsed.

    Examples:
    - Text is not valid JSON
    - Top-level value is not an object keyed by date
    - An entry has a malformed date or a non-string meal value
    """

    user_message = "無效的檔案格式。"
