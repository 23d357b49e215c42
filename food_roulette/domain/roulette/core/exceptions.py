"""Domain exceptions for the roulette bounded context.

Every exception carries a ``user_message`` suitable for showing to the user;
raising one never leaves the session in a partially updated state.
"""


class RouletteDomainError(Exception):
    """Base exception for roulette domain errors."""

    user_message = "操作失敗"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.user_message)


class InvalidItemNameError(RouletteDomainError):
    """Raised when adding an item with a blank name."""

    user_message = "請輸入食物名稱"


class ItemNotFoundError(RouletteDomainError):
    """Raised when deleting an item id that is not on the wheel."""

    user_message = "找不到這個項目"


class NotEnoughItemsError(RouletteDomainError):
    """Raised when the wheel would hold, or already holds, fewer than 2 items.

    Covers both deleting down below the minimum and spinning a wheel that is
    too small.
    """

    user_message = "清單至少需要 2 個項目才能旋轉唷！"


class InvalidGameStateTransitionError(RouletteDomainError):
    """Raised on a GameState transition outside the allowed set."""

    user_message = "目前無法進行這個操作"
