"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from kubectl_cf.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Functions call ctx.feedback methods instead of threading a quiet flag
    through their signatures.

    Two modes:
    - Interactive: Show all diagnostics (info, success, warnings, errors)
    - Suppressed: Only warnings and errors (used by --export, whose stdout is
      meant to be eval'd by the shell)

    Usage:
        ctx.feedback.success(f"Symlink {config} now points to {target}")

        if env.kubeconfig_env_is_stale():
            ctx.feedback.warning("KUBECONFIG does not point at the managed symlink")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for quiet mode: info and success are dropped."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
