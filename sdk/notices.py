# sdk/notices.py
from dataclasses import dataclass
from typing import Callable, List, Optional

SUCCESS = "success"
ERROR = "error"
INFO = "info"


@dataclass(frozen=True)
class Notice:
    level: str
    message: str

    @property
    def is_success(self) -> bool:
        return self.level == SUCCESS


class NoticeBoard:
    """Collects user-facing notices; rendering is up to the listener."""

    def __init__(self, listener: Optional[Callable[[Notice], None]] = None):
        self.notices: List[Notice] = []
        self.listener = listener

    def _post(self, level: str, message: str) -> Notice:
        notice = Notice(level, message)
        self.notices.append(notice)
        if self.listener is not None:
            self.listener(notice)
        return notice

    def success(self, message: str) -> Notice:
        return self._post(SUCCESS, message)

    def error(self, message: str) -> Notice:
        return self._post(ERROR, message)

    def info(self, message: str) -> Notice:
        return self._post(INFO, message)

    @property
    def last(self) -> Optional[Notice]:
        return self.notices[-1] if self.notices else None

    def drain(self) -> List[Notice]:
        out, self.notices = self.notices, []
        return out
