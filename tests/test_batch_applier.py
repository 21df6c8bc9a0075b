"""Module: test_batch_applier.py

Tests for BatchApplier: mask application, write failure recovery and
the marked count bookkeeping.
"""

import errno

import pytest

from attredit.app.ports import WriteDecision
from attredit.core.attributes.batch_applier import BatchApplier, BatchOutcome, BatchState
from attredit.core.attributes.session import ChattrSession
from attredit.domain.mask import Mask
from tests.mocks import FakeAttributeProvider, ScriptedInteraction

SET_I = Mask(and_mask=0xFFFFFFFF, or_mask=0x10)


@pytest.fixture
def session(small_catalog, three_marked):
    return ChattrSession.create(small_catalog, three_marked)


def make_applier(session, provider, interaction=None):
    return BatchApplier(session, provider, interaction or ScriptedInteraction())


def test_set_marked_applied_to_all_files(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    applier = make_applier(session, provider)
    assert applier.state is BatchState.IDLE

    result = applier.run_batch(SET_I)

    assert provider.flags == {"/data/f1": 0x10, "/data/f2": 0x10, "/data/f3": 0x10}
    assert three_marked.marked_count == 0
    assert result.succeeded_count == 3
    assert not result.cancelled
    assert applier.state is BatchState.DONE
    assert session.mask == SET_I


def test_clear_marked_scenario(session):
    provider = FakeAttributeProvider({"/data/f1": 0x20, "/data/f2": 0x20, "/data/f3": 0x20})
    result = make_applier(session, provider).run_batch(Mask(and_mask=0xFFFFFFDF))
    assert set(provider.flags.values()) == {0}
    assert [item.old_flags for item in result.items] == [0x20, 0x20, 0x20]


def test_mask_applied_to_live_flags_of_each_file(session):
    provider = FakeAttributeProvider({"/data/f1": 0x20, "/data/f2": 0x80000, "/data/f3": 0x10})
    make_applier(session, provider).run_batch(SET_I)
    assert provider.flags == {"/data/f1": 0x30, "/data/f2": 0x80010, "/data/f3": 0x10}


def test_cancel_leaves_failed_and_later_files_marked(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    provider.fail_writes("/data/f2")
    interaction = ScriptedInteraction(decisions=[WriteDecision.CANCEL])

    result = make_applier(session, provider, interaction).run_batch(SET_I)

    assert result.cancelled
    assert provider.flags == {"/data/f1": 0x10, "/data/f2": 0, "/data/f3": 0}
    assert three_marked.marked_paths() == ["/data/f2", "/data/f3"]
    assert "/data/f3" not in provider.reads
    assert interaction.prompts == ["/data/f2"]
    assert result.items[-1].skip_reason == "cancelled"


def test_vanished_file_skipped_without_prompt(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f3": 0})
    interaction = ScriptedInteraction()

    result = make_applier(session, provider, interaction).run_batch(SET_I)

    assert interaction.prompts == []
    assert three_marked.marked_count == 0
    assert provider.flags == {"/data/f1": 0x10, "/data/f3": 0x10}
    assert result.missing_count == 1
    assert result.failed_count == 0
    assert result.items[1].skip_reason == "missing"


def test_ignore_skips_one_file(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    provider.fail_writes("/data/f1")
    provider.fail_writes("/data/f2")
    interaction = ScriptedInteraction(decisions=[WriteDecision.IGNORE, WriteDecision.IGNORE])

    result = make_applier(session, provider, interaction).run_batch(SET_I)

    assert interaction.prompts == ["/data/f1", "/data/f2"]
    assert provider.flags["/data/f3"] == 0x10
    assert three_marked.marked_count == 0
    assert result.failed_count == 2
    assert not session.ignore_all


def test_ignore_all_suppresses_later_prompts(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    provider.fail_writes("/data/f1", code=errno.EPERM)
    provider.fail_writes("/data/f3", code=errno.EROFS)
    interaction = ScriptedInteraction(decisions=[WriteDecision.IGNORE_ALL])

    result = make_applier(session, provider, interaction).run_batch(SET_I)

    assert interaction.prompts == ["/data/f1"]
    assert session.ignore_all
    assert provider.flags["/data/f2"] == 0x10
    assert [item.skip_reason for item in result.items] == ["ignore_all", "", "ignore_all"]
    assert three_marked.marked_count == 0


def test_retry_until_success(session):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    provider.fail_writes("/data/f1", times=2)
    interaction = ScriptedInteraction(decisions=[WriteDecision.RETRY, WriteDecision.RETRY])

    result = make_applier(session, provider, interaction).run_batch(SET_I)

    assert provider.flags["/data/f1"] == 0x10
    assert result.items[0].attempts == 3
    assert result.items[0].success
    assert len(interaction.prompts) == 2


def test_marked_count_is_monotonic(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    provider.fail_writes("/data/f3")
    interaction = ScriptedInteraction(decisions=[WriteDecision.RETRY, WriteDecision.CANCEL])
    applier = make_applier(session, provider, interaction)

    counts = []
    while (index := session.cursor.seek()) is not None:
        before = three_marked.marked_count
        outcome = applier.apply_to_file(index, SET_I)
        counts.append((outcome, before, three_marked.marked_count))
        if outcome is BatchOutcome.STOP_ALL:
            break

    assert counts == [
        (BatchOutcome.CONTINUE, 3, 2),
        (BatchOutcome.CONTINUE, 2, 1),
        (BatchOutcome.STOP_ALL, 1, 1),
    ]


def test_prompting_state_during_question(session):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    provider.fail_writes("/data/f1", times=1)
    states = []

    class Recorder(ScriptedInteraction):
        def ask_write_failure(self, path, error):
            states.append(applier.state)
            return WriteDecision.RETRY

    applier = make_applier(session, provider, Recorder())
    applier.run_batch(SET_I)
    assert states == [BatchState.PROMPTING]


def test_set_flags_writes_verbatim(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0xFF, "/data/f2": 0, "/data/f3": 0})
    applier = make_applier(session, provider)

    assert applier.set_flags(0, 0x20) is BatchOutcome.CONTINUE
    assert provider.flags["/data/f1"] == 0x20
    assert not three_marked.is_marked(0)
    assert session.history[0].old_flags is None


def test_single_file_writes_stay_out_of_batch_results(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    applier = make_applier(session, provider)

    for _ in range(5):
        applier.set_flags(0, 0x20)
    assert len(session.history) == 5
    assert applier._items is None

    result = applier.run_batch(SET_I)

    assert [item.path for item in result.items] == ["/data/f2", "/data/f3"]
    assert len(session.history) == 7
    assert applier._items is None


def test_batch_results_do_not_carry_over(session, three_marked):
    provider = FakeAttributeProvider({"/data/f1": 0, "/data/f2": 0, "/data/f3": 0})
    applier = make_applier(session, provider)

    first = applier.run_batch(SET_I)
    applier.set_flags(1, 0x20)
    three_marked.set_mark(2, True)
    second = applier.run_batch(SET_I)

    assert len(first.items) == 3
    assert [item.path for item in second.items] == ["/data/f3"]
