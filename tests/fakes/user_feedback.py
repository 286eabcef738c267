"""Fake UserFeedback that records messages instead of printing them."""

from kubectl_cf.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records every message by level for test assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def of_level(self, level: str) -> list[str]:
        """Messages recorded at one level, in order."""
        return [message for recorded, message in self.messages if recorded == level]

    @property
    def text(self) -> str:
        """All messages joined with newlines, for substring assertions."""
        return "\n".join(message for _, message in self.messages)
