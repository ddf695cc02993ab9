import pytest

from core.domain.case_variant import CaseVariant, DistanceDirection
from core.domain.errors import ErrorKind
from core.services.toolbox import (
    DECODE_FAILURE_MESSAGE,
    run_case,
    run_decode,
    run_distance,
    run_encode,
    run_tokenize,
)


def test_run_case_success():
    outcome = run_case("hello world test", CaseVariant.KEBAB)
    assert outcome.ok
    assert outcome.output == "hello-world-test"
    assert outcome.variant is CaseVariant.KEBAB
    assert outcome.error_kind is None


def test_run_tokenize_returns_list():
    outcome = run_tokenize("helloWorld")
    assert outcome.ok
    assert outcome.output == ["hello", "world"]


def test_run_encode_and_decode():
    encoded = run_encode("Hello, World!")
    assert encoded.output == "SGVsbG8sIFdvcmxkIQ=="
    decoded = run_decode(encoded.output)
    assert decoded.ok
    assert decoded.output == "Hello, World!"


def test_run_decode_failure_is_explicit():
    outcome = run_decode("invalid-base64!")
    assert not outcome.ok
    assert outcome.output is None
    assert outcome.error_kind is ErrorKind.DECODE
    assert outcome.message == DECODE_FAILURE_MESSAGE


@pytest.mark.parametrize(
    "direction, value, message",
    [
        (DistanceDirection.MILES_TO_KM, -1, "Miles cannot be negative"),
        (DistanceDirection.KM_TO_MILES, -0.5, "Kilometers cannot be negative"),
    ],
)
def test_run_distance_validation_message_is_verbatim(direction, value, message):
    outcome = run_distance(value, direction)
    assert not outcome.ok
    assert outcome.error_kind is ErrorKind.VALIDATION
    assert outcome.message == message
    assert outcome.output is None
    assert outcome.direction is direction


def test_run_distance_success():
    assert run_distance(10, DistanceDirection.MILES_TO_KM).output == 16.0934
    assert run_distance(16.0934, DistanceDirection.KM_TO_MILES).output == pytest.approx(10, abs=1e-4)
    assert run_distance(1, DistanceDirection.MILES_TO_KM).input == "1.0"
