import pytest

from arcade_guard.errors import TelemetryError
from arcade_guard.telemetry import MemoryTelemetry, ReflexTelemetry, TelemetryKind, parse_telemetry


def test_parse_reflex_wire_keys() -> None:
    telemetry = parse_telemetry(TelemetryKind.REFLEX, {"score": 2, "history": [1000, 1200.0]})
    assert telemetry == ReflexTelemetry(claimed_score=2, hit_timestamps=(1000, 1200))


def test_parse_descriptive_keys() -> None:
    telemetry = parse_telemetry("MEMORY", {"claimedLevel": 10, "elapsedMillis": 40_000})
    assert telemetry == MemoryTelemetry(claimed_level=10, elapsed_ms=40_000)


def test_parse_keeps_length_mismatch_for_checker() -> None:
    telemetry = parse_telemetry(TelemetryKind.REFLEX, {"score": 5, "history": [1, 2]})
    assert telemetry.claimed_score == 5
    assert len(telemetry.hit_timestamps) == 2


@pytest.mark.parametrize(
    "data",
    [
        {"history": [1, 2]},
        {"score": "25", "history": []},
        {"score": True, "history": []},
        {"score": -1, "history": []},
        {"score": 1, "history": "1000"},
        {"score": 1, "history": [None]},
        {"score": 1, "history": [1.5]},
    ],
)
def test_parse_reflex_rejects_bad_shapes(data) -> None:
    with pytest.raises(TelemetryError):
        parse_telemetry(TelemetryKind.REFLEX, data)


def test_parse_rejects_unknown_kind_and_non_mapping() -> None:
    with pytest.raises(TelemetryError):
        parse_telemetry("PHYSICS", {})
    with pytest.raises(TelemetryError):
        parse_telemetry(TelemetryKind.MEMORY, [10, 9000])
