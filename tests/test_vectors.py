"""Published Fernet test vectors."""

import pytest

from conftest import load_fixture
from fernetex.codec import decode, generate, verify
from fernetex.exceptions import ErrorKind


@pytest.mark.parametrize("case", load_fixture("generate"))
def test_generate(case: dict[str, object]) -> None:
    """Tokens match the reference vectors given the same IV and time."""
    encoded = generate(case["src"], case["secret"], iv=case["iv"], now=case["now"])  # type: ignore[arg-type]
    assert encoded.iv == bytes(case["iv"])  # type: ignore[arg-type]
    assert encoded.token == case["token"]


@pytest.mark.parametrize("case", load_fixture("verify"))
def test_verify(case: dict[str, object]) -> None:
    plaintext = verify(
        case["token"],  # type: ignore[arg-type]
        case["secret"],  # type: ignore[arg-type]
        ttl=case["ttl_sec"],  # type: ignore[arg-type]
        now=case["now"],  # type: ignore[arg-type]
    )
    assert plaintext == case["src"].encode()  # type: ignore[union-attr]


@pytest.mark.parametrize("case", load_fixture("invalid"), ids=lambda case: case["desc"])
def test_invalid(case: dict[str, object]) -> None:
    """Each malformed, forged or out-of-window token is rejected for its stated reason."""
    result = decode(
        case["token"],  # type: ignore[arg-type]
        case["secret"],  # type: ignore[arg-type]
        ttl=case["ttl_sec"],  # type: ignore[arg-type]
        now=case["now"],  # type: ignore[arg-type]
    )
    assert result.value is None
    assert result.kind is ErrorKind(case["kind"])
    assert result.error is not None
    assert result.error.message in case["desc"]  # type: ignore[operator]
