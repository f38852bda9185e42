from typing import Any, List, Optional


class InventoryError(Exception):
    """Base class for errors raised by the inventory client."""


class DraftValidationError(InventoryError):
    """A draft failed the minimal presence/number checks before submission."""

    def __init__(self, fields: List[str], message: str = "Please fill all fields correctly"):
        super().__init__(message)
        self.fields = fields
        self.message = message


class RemoteStoreError(InventoryError):
    """The remote product store could not be reached or answered with an error."""

    def __init__(self, action: str, detail: Any = None, status_code: Optional[int] = None):
        self.action = action
        self.detail = detail
        self.status_code = status_code
        msg = f"{action} failed"
        if status_code is not None:
            msg += f" (HTTP {status_code})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
