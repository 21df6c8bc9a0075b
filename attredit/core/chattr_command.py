"""Module: chattr_command.py

Author: Michael Economou
Date: 2026-02-02

The chattr command: show the attribute form for the focused file or for
each marked file in turn, and carry out the button the user pressed.

- Set: write the displayed flags to the file shown, then move on to the
  next marked file (if any).
- Set all / Marked all / Set marked / Clear marked: compile a mask and
  apply it to every remaining marked file, then stop.
- Cancel: stop, leaving remaining files marked.

The command refuses to start when any target is on a non-local filesystem,
and stops with a message when the flags of the file to display cannot be
read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from attredit.app.ports import BulkCommand
from attredit.config import ERROR_DIALOG_TITLE, PREVIEW_PLACEHOLDER
from attredit.core.attributes.batch_applier import BatchApplier, BatchOutcome
from attredit.core.attributes.data_classes import ApplyItem, BatchResult
from attredit.core.attributes.errors import (
    AttributeReadError,
    ChattrError,
    FatalPreconditionError,
    describe_os_error,
)
from attredit.core.attributes.session import ChattrSession
from attredit.domain.mask import BulkMode, compile_mask
from attredit.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from attredit.app.ports import (
        AttributeProviderPort,
        FileListingPort,
        InteractionPort,
        LocalityCheckerPort,
    )
    from attredit.domain.attributes import AttributeCatalog

logger = get_cached_logger(__name__)

BULK_MODES: dict[BulkCommand, BulkMode] = {
    BulkCommand.SET_ALL: BulkMode.SET_ALL,
    BulkCommand.MARKED_ALL: BulkMode.SET_MARKED,
    BulkCommand.SET_MARKED: BulkMode.ADD_MARKED,
    BulkCommand.CLEAR_MARKED: BulkMode.CLEAR_MARKED,
}

NON_LOCAL_MESSAGE = "Cannot change attributes on non-local filesystems"


@dataclass
class ChattrResult:
    """Summary of one command invocation.

    Attributes:
        need_update: True when files may have changed and views should refresh.
        cancelled: True when the user stopped processing of remaining files.
        error: Message of the error that aborted the command, if any.
        batches: Results of bulk commands run during the invocation.
        items: Every per-file record of the invocation, in order.

    """

    need_update: bool = False
    cancelled: bool = False
    error: str | None = None
    batches: list[BatchResult] = field(default_factory=list)
    items: list[ApplyItem] = field(default_factory=list)


class ChattrCommand:
    """Interactive attribute editing over a file listing."""

    def __init__(
        self,
        provider: AttributeProviderPort,
        interaction: InteractionPort,
        listing: FileListingPort,
        catalog: AttributeCatalog,
        locality_checker: LocalityCheckerPort,
        placeholder: str = PREVIEW_PLACEHOLDER,
    ):
        self.provider = provider
        self.interaction = interaction
        self.listing = listing
        self.catalog = catalog
        self.locality_checker = locality_checker
        self.placeholder = placeholder
        self.session: ChattrSession | None = None

    def run(self) -> ChattrResult:
        """Run the command until the user is done or the marked files run out."""
        session = ChattrSession.create(self.catalog, self.listing, self.placeholder)
        self.session = session
        applier = BatchApplier(session, self.provider, self.interaction)
        result = ChattrResult()

        if not len(self.listing):
            logger.warning("[ChattrCommand] Nothing to do: empty listing")
            return result

        logger.info(
            "[ChattrCommand] Started (%d entries, %d marked)",
            len(self.listing),
            self.listing.marked_count,
        )

        try:
            self.check_locality(self._target_paths())
            self._loop(session, applier, result)
        except ChattrError as e:
            logger.error("[ChattrCommand] %s", e)
            result.error = str(e)
            self.interaction.show_error(ERROR_DIALOG_TITLE, str(e))

        result.items = list(session.history)
        logger.info(
            "[ChattrCommand] Finished: %d files processed, cancelled=%s, need_update=%s",
            len(result.items),
            result.cancelled,
            result.need_update,
        )
        return result

    def check_locality(self, paths: list[str]) -> None:
        """Refuse to work on anything that is not on a local filesystem.

        Raises:
            FatalPreconditionError: If any path is not local.

        """
        for path in paths:
            if not self.locality_checker.is_local(path):
                logger.warning("[ChattrCommand] Non-local target: %s", path)
                raise FatalPreconditionError(NON_LOCAL_MESSAGE)

    def _target_paths(self) -> list[str]:
        if self.listing.marked_count:
            return [
                self.listing.entry(i).path
                for i in range(len(self.listing))
                if self.listing.is_marked(i)
            ]
        return [self.listing.entry(self.listing.current_index).path]

    def _read_flags(self, path: str) -> int:
        try:
            return self.provider.read_flags(path)
        except OSError as e:
            raise AttributeReadError(path, e) from e

    def _loop(self, session: ChattrSession, applier: BatchApplier, result: ChattrResult) -> None:
        while True:
            marked = self.listing.marked_count
            if marked:
                index = session.cursor.seek()
                if index is None:
                    break
            else:
                index = self.listing.current_index

            path = self.listing.entry(index).path
            session.selection.load_flags(self._read_flags(path))

            command = self.interaction.run_attribute_dialog(
                path, session.selection, self.catalog, marked > 1
            )
            logger.info("[ChattrCommand] %s: %s", path, command.value)

            if command is BulkCommand.CANCEL:
                return

            if command is BulkCommand.SET:
                ended = self._set_single(session, applier, result, index, marked)
            else:
                self._run_bulk(session, applier, result, command)
                ended = True

            if self.listing.marked_count and not result.cancelled and self.listing.is_marked(index):
                self.listing.clear_mark(index)
                result.need_update = True

            if ended or result.cancelled or not self.listing.marked_count:
                return

    def _set_single(
        self,
        session: ChattrSession,
        applier: BatchApplier,
        result: ChattrResult,
        index: int,
        marked: int,
    ) -> bool:
        """Write the displayed flags exactly as shown. Returns True if the command ends."""
        result.need_update = True
        selection = session.selection

        if not selection.flags_changed:
            return marked <= 1

        if marked > 1:
            outcome = applier.set_flags(index, selection.flags)
            if outcome is BatchOutcome.STOP_ALL:
                result.cancelled = True
                return True
            return False

        # Single or last file: a failure is reported, not negotiated
        path = self.listing.entry(index).path
        item = ApplyItem(path=path, new_flags=selection.flags, attempts=1)
        try:
            self.provider.write_flags(path, selection.flags)
            item.success = True
        except OSError as e:
            item.error_message = describe_os_error(e)
            logger.warning("[ChattrCommand] Cannot chattr %s: %s", path, item.error_message)
            if session.ignore_all:
                item.skip_reason = "ignore_all"
            else:
                self.interaction.show_error(
                    ERROR_DIALOG_TITLE,
                    f'Cannot chattr "{self.listing.entry(index).filename}"\n{item.error_message}',
                )
        session.history.append(item)
        return True

    def _run_bulk(
        self,
        session: ChattrSession,
        applier: BatchApplier,
        result: ChattrResult,
        command: BulkCommand,
    ) -> None:
        mask = compile_mask(session.selection, BULK_MODES[command])
        batch = applier.run_batch(mask)
        result.batches.append(batch)
        result.cancelled = batch.cancelled
        result.need_update = True
