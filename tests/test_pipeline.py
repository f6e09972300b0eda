"""
Tests for the verification pipeline decision order.
"""

import random

import pytest

from mailverdict.models.status import VerificationStatus
from mailverdict.verifier.pipeline import VerificationPipeline, verify_email
from tests.conftest import ScriptedRandom


def make_pipeline(rng):
    return VerificationPipeline(rng=rng, mx_delay=0, catch_all_delay=0, mailbox_delay=0)


class TestDecisionOrder:
    """Test each short-circuit of the pipeline."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["", "   ", "\t"])
    async def test_empty_input_is_none_without_checks(self, email):
        rng = ScriptedRandom()
        assert await make_pipeline(rng).run(email) == VerificationStatus.none
        assert rng.draws == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["nope", "a..b@x.com", "a@b", "a@x.com "])
    async def test_bad_syntax_is_invalid_without_checks(self, email):
        rng = ScriptedRandom()
        assert await make_pipeline(rng).run(email) == VerificationStatus.invalid
        assert rng.draws == 0

    @pytest.mark.asyncio
    async def test_missing_mx_is_invalid(self):
        rng = ScriptedRandom([0.9])
        assert await make_pipeline(rng).run("jane@acme.io") == VerificationStatus.invalid
        assert rng.draws == 1

    @pytest.mark.asyncio
    async def test_role_exact_match(self):
        # gmail.com is allow-listed, so no draw is needed to reach the role step
        rng = ScriptedRandom()
        assert await make_pipeline(rng).run("admin@gmail.com") == VerificationStatus.role
        assert rng.draws == 0

    @pytest.mark.asyncio
    async def test_role_dotted_prefix(self):
        rng = ScriptedRandom([0.1])
        assert await make_pipeline(rng).run("admin.x@acme.io") == VerificationStatus.role

    @pytest.mark.asyncio
    async def test_catch_all(self):
        rng = ScriptedRandom([0.0, 0.6])
        assert await make_pipeline(rng).run("jane@company.com") == VerificationStatus.catch_all

    @pytest.mark.asyncio
    @pytest.mark.parametrize("index,expected", [
        (0, VerificationStatus.invalid),
        (1, VerificationStatus.inbox_full),
        (2, VerificationStatus.disabled),
    ])
    async def test_missing_mailbox_picks_failure_status(self, index, expected):
        rng = ScriptedRandom([0.0, 0.6, 0.9], choice_index=index)
        assert await make_pipeline(rng).run("jane@acme.io") == expected

    @pytest.mark.asyncio
    async def test_generic_local_part_fails_mailbox(self):
        rng = ScriptedRandom([0.5, 0.3], choice_index=2)
        assert await make_pipeline(rng).run("testuser@gmail.com") == VerificationStatus.disabled

    @pytest.mark.asyncio
    async def test_safe(self):
        rng = ScriptedRandom([0.5, 0.8])
        assert await make_pipeline(rng).run("jane@gmail.com") == VerificationStatus.safe
        assert rng.draws == 2

    @pytest.mark.asyncio
    async def test_steps_run_sequentially_with_configured_delays(self, monkeypatch):
        slept = []

        async def fake_sleep(seconds):
            slept.append(seconds)

        monkeypatch.setattr("asyncio.sleep", fake_sleep)
        pipeline = VerificationPipeline(
            rng=ScriptedRandom([0.5, 0.8]),
            mx_delay=0.5,
            catch_all_delay=0.8,
            mailbox_delay=1.0,
        )
        assert await pipeline.run("jane@gmail.com") == VerificationStatus.safe
        assert slept == [0.5, 0.8, 1.0]


class TestDistribution:
    """Test the stochastic contract with real seeded sources."""

    ALLOWED = {
        VerificationStatus.invalid,
        VerificationStatus.catch_all,
        VerificationStatus.inbox_full,
        VerificationStatus.disabled,
        VerificationStatus.safe,
    }

    @pytest.mark.asyncio
    async def test_statuses_drawn_from_declared_set(self):
        pipeline = make_pipeline(random.Random(7))
        seen = {await pipeline.run("someone@random-domain.net") for _ in range(200)}
        assert seen <= self.ALLOWED
        assert len(seen) > 1

    @pytest.mark.asyncio
    async def test_same_seed_reproduces_sequence(self):
        first = make_pipeline(random.Random(42))
        second = make_pipeline(random.Random(42))
        a = [await first.run("jane@acme.io") for _ in range(50)]
        b = [await second.run("jane@acme.io") for _ in range(50)]
        assert a == b


class TestVerifyEmail:
    """Test the one-shot helper."""

    @pytest.mark.asyncio
    async def test_uses_default_latencies(self, monkeypatch):
        slept = []

        async def fake_sleep(seconds):
            slept.append(seconds)

        monkeypatch.setattr("asyncio.sleep", fake_sleep)
        status = await verify_email("jane@gmail.com", rng=ScriptedRandom([0.5, 0.8]))
        assert status == VerificationStatus.safe
        assert slept == [0.5, 0.8, 1.0]
