"""attredit.core.attributes.batch_applier.

Sequential application of attribute changes to marked files.

The applier walks the session's file cursor one file at a time, re-reads
each file's live flags, applies the mask and writes the result. A write
failure is resolved by asking the user (Ignore, Ignore all, Retry, Cancel);
a file that can no longer be read is skipped silently. Changes already made
are never rolled back.

Author: Michael Economou
Date: 2026-02-02
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from attredit.app.ports import WriteDecision
from attredit.core.attributes.data_classes import ApplyItem, BatchResult
from attredit.core.attributes.errors import describe_os_error
from attredit.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from attredit.app.ports import AttributeProviderPort, InteractionPort
    from attredit.core.attributes.session import ChattrSession
    from attredit.domain.mask import Mask

logger = get_cached_logger(__name__)


class BatchOutcome(Enum):
    """Result of processing one file."""

    CONTINUE = "continue"
    SKIP_MISSING = "skip_missing"
    STOP_ALL = "stop_all"


class BatchState(Enum):
    """Lifecycle of the applier."""

    IDLE = "idle"
    APPLYING = "applying"
    PROMPTING = "prompting"
    DONE = "done"


class BatchApplier:
    """Apply masks or exact flags to the marked files of a session."""

    def __init__(
        self,
        session: ChattrSession,
        provider: AttributeProviderPort,
        interaction: InteractionPort,
    ):
        self.session = session
        self.provider = provider
        self.interaction = interaction
        self.state = BatchState.IDLE
        # Items of the batch in progress, None outside run_batch()
        self._items: list[ApplyItem] | None = None

    # =====================================
    # Per-file operations
    # =====================================

    def apply_to_file(self, index: int, mask: Mask) -> BatchOutcome:
        """Apply `mask` to the live flags of the entry at `index`.

        Returns:
            CONTINUE when the file was processed (written or skipped by the
            user), SKIP_MISSING when its flags could not be read any more,
            STOP_ALL when the user cancelled the remaining files.

        """
        path = self.session.listing.entry(index).path

        try:
            old_flags = self.provider.read_flags(path)
        except OSError as e:
            # Vanished or unreadable since it was marked
            logger.warning(
                "[BatchApplier] Skipping %s, cannot read flags: %s", path, describe_os_error(e)
            )
            self.session.cursor.finish(index)
            self._record(
                ApplyItem(path=path, skip_reason="missing", error_message=describe_os_error(e))
            )
            return BatchOutcome.SKIP_MISSING

        return self._write_with_recovery(index, old_flags, mask.apply(old_flags))

    def set_flags(self, index: int, flags: int) -> BatchOutcome:
        """Write `flags` verbatim to the entry at `index` (single-file Set)."""
        return self._write_with_recovery(index, None, flags)

    def _write_with_recovery(self, index: int, old_flags: int | None, new_flags: int) -> BatchOutcome:
        """Write flags, asking the user how to proceed on each failure."""
        path = self.session.listing.entry(index).path
        item = ApplyItem(path=path, old_flags=old_flags, new_flags=new_flags)

        while True:
            item.attempts += 1
            try:
                self.provider.write_flags(path, new_flags)
            except OSError as e:
                item.error_message = describe_os_error(e)
                logger.warning(
                    "[BatchApplier] Cannot chattr %s (attempt %d): %s",
                    path,
                    item.attempts,
                    item.error_message,
                )

                if self.session.ignore_all:
                    item.skip_reason = "ignore_all"
                    return self._finish(index, item)

                decision = self._ask(path, e)

                if decision is WriteDecision.RETRY:
                    continue
                if decision is WriteDecision.IGNORE:
                    item.skip_reason = "ignored"
                    return self._finish(index, item)
                if decision is WriteDecision.IGNORE_ALL:
                    self.session.ignore_all = True
                    logger.info("[BatchApplier] Ignoring all further write errors")
                    item.skip_reason = "ignore_all"
                    return self._finish(index, item)

                # Cancel: leave this and the remaining files marked
                item.skip_reason = "cancelled"
                self._record(item)
                logger.info("[BatchApplier] Cancelled at %s", path)
                return BatchOutcome.STOP_ALL

            item.success = True
            item.error_message = ""
            logger.debug(
                "[BatchApplier] %s: %s -> %#010x",
                path,
                "verbatim" if old_flags is None else f"{old_flags:#010x}",
                new_flags,
                extra={"dev_only": True},
            )
            return self._finish(index, item)

    def _ask(self, path: str, error: OSError) -> WriteDecision:
        previous_state = self.state
        self.state = BatchState.PROMPTING
        try:
            decision = self.interaction.ask_write_failure(path, error)
        finally:
            self.state = previous_state
        logger.info("[BatchApplier] User chose %s for %s", decision.value, path)
        return decision

    def _finish(self, index: int, item: ApplyItem) -> BatchOutcome:
        self.session.cursor.finish(index)
        self._record(item)
        return BatchOutcome.CONTINUE

    def _record(self, item: ApplyItem) -> None:
        if self._items is not None:
            self._items.append(item)
        self.session.history.append(item)

    # =====================================
    # Batch
    # =====================================

    def run_batch(self, mask: Mask) -> BatchResult:
        """Apply `mask` to every marked file, in listing order.

        Stops at the first STOP_ALL, leaving that file and all later marked
        files untouched and still marked.
        """
        self.session.mask = mask
        self._items = []
        self.state = BatchState.APPLYING
        result = BatchResult()

        logger.info(
            "[BatchApplier] Applying %s to %d marked files",
            mask,
            self.session.listing.marked_count,
        )

        try:
            while (index := self.session.cursor.seek()) is not None:
                outcome = self.apply_to_file(index, mask)
                if outcome is BatchOutcome.STOP_ALL:
                    result.cancelled = True
                    break
            result.items = self._items
        finally:
            self._items = None

        self.state = BatchState.DONE

        logger.info("[BatchApplier] %s", result)
        return result
