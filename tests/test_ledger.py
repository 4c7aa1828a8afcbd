import pytest

from aasidgen.errors import IdSpaceExhaustedError
from aasidgen.ledger import AllocationLedger, attempt_seed


def test_cached_seed_skips_generator():
    ledger = AllocationLedger()
    calls: list[str] = []

    def generator(seed: str) -> str:
        calls.append(seed)
        return f"id-{seed}"

    assert ledger.get_or_create("asset:A", generator) == "id-asset:A"
    assert ledger.get_or_create("asset:A", generator) == "id-asset:A"
    assert calls == ["asset:A"]


def test_collision_probes_with_suffixed_seeds():
    ledger = AllocationLedger()
    attempts: list[str] = []

    def generator(seed: str) -> str:
        attempts.append(seed)
        return "taken" if "#" not in seed else f"free-{seed}"

    assert ledger.get_or_create("first", generator) == "taken"
    assert ledger.get_or_create("second", generator) == "free-second#1"
    assert attempts == ["first", "second", "second#1"]
    assert ledger.cache == {"first": "taken", "second": "free-second#1"}
    assert ledger.issued == {"taken", "free-second#1"}


def test_colliding_candidate_is_never_cached():
    ledger = AllocationLedger(max_attempts=3)
    ledger.get_or_create("a", lambda seed: "x")

    with pytest.raises(IdSpaceExhaustedError) as excinfo:
        ledger.get_or_create("b", lambda seed: "x")

    assert excinfo.value.attempts == 3
    assert excinfo.value.code == "AID002"
    assert "b" not in ledger
    assert ledger.issued == {"x"}


def test_invalid_bound_rejected():
    with pytest.raises(ValueError):
        AllocationLedger(max_attempts=0)


def test_attempt_seed_suffix():
    assert attempt_seed("concept:X", 0) == "concept:X"
    assert attempt_seed("concept:X", 1) == "concept:X#1"
    assert attempt_seed("concept:X", 12) == "concept:X#12"
