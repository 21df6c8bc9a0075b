"""Module: data_classes.py

Author: Michael Economou
Date: 2026-02-02

Records of what a batch did to each file.
"""

from dataclasses import dataclass, field


@dataclass
class ApplyItem:
    """Outcome of changing the flags of one file.

    Attributes:
        path: File the change was attempted on.
        old_flags: Flags read before the change, None when written verbatim.
        new_flags: Flags that were (or would have been) written.
        success: True when the write succeeded.
        skip_reason: Why the file was left unchanged: "missing", "ignored",
            "ignore_all" or "cancelled". Empty on success.
        error_message: System error text of the last failed attempt.
        attempts: Number of write attempts (more than one after Retry).

    """

    path: str
    old_flags: int | None = None
    new_flags: int | None = None
    success: bool = False
    skip_reason: str = ""
    error_message: str = ""
    attempts: int = 0

    @property
    def changed(self) -> bool:
        return self.success and self.old_flags != self.new_flags


@dataclass
class BatchResult:
    """Aggregate result of one run_batch() call."""

    items: list[ApplyItem] = field(default_factory=list)
    cancelled: bool = False

    @property
    def succeeded_count(self) -> int:
        return sum(1 for item in self.items if item.success)

    @property
    def missing_count(self) -> int:
        return sum(1 for item in self.items if item.skip_reason == "missing")

    @property
    def failed_count(self) -> int:
        return sum(
            1
            for item in self.items
            if not item.success and item.error_message and item.skip_reason != "missing"
        )

    def __str__(self) -> str:
        return (
            f"BatchResult({self.succeeded_count} ok, {self.failed_count} failed, "
            f"{self.missing_count} missing{', cancelled' if self.cancelled else ''})"
        )
