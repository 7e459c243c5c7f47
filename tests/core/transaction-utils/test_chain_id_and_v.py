from hypothesis import (
    given,
    strategies as st,
)
import pytest

from eth_tx._utils.transactions import (
    encode_v,
    extract_recovery_id,
    resolve_chain_id,
    v_bounds,
)


@pytest.mark.parametrize(
    "recovery_id, chain_id, expected_v",
    (
        (0, 0, 27),
        (1, 0, 28),
        (0, 1, 37),
        (1, 1, 38),
        (0, 3, 41),
        (1, 1337, 2710),
    ),
)
def test_encode_v(recovery_id, chain_id, expected_v):
    assert encode_v(recovery_id, chain_id) == expected_v


@pytest.mark.parametrize(
    "v, chain_id_hint, expected_chain_id",
    (
        # odd v: (v - 35) / 2
        (37, 0, 1),
        # even v: (v - 36) / 2
        (38, 0, 1),
        (41, 0, 3),
        (2710, 0, 1337),
        # unprotected
        (27, 0, 0),
        (28, 0, 0),
        # below 37 nothing is derived, even if EIP-155 shaped
        (35, 0, 0),
        (36, 0, 0),
        (0, 0, 0),
        # a non-zero hint is kept verbatim
        (37, 5, 5),
        (27, 1, 1),
    ),
)
def test_resolve_chain_id(v, chain_id_hint, expected_chain_id):
    assert resolve_chain_id(v, chain_id_hint) == expected_chain_id


@pytest.mark.parametrize(
    "v, chain_id, expected_recovery_id",
    (
        (37, 1, 0),
        (38, 1, 1),
        (27, 0, 0),
        (28, 0, 1),
        # an unprotected v read against a non-zero chain id
        (28, 1, 1),
        # a bare recovery id
        (0, 0, 0),
        (1, 0, 1),
        (1, 1, 1),
    ),
)
def test_extract_recovery_id(v, chain_id, expected_recovery_id):
    assert extract_recovery_id(v, chain_id) == expected_recovery_id


@given(
    recovery_id=st.sampled_from((0, 1)),
    chain_id=st.integers(min_value=1, max_value=2**64),
)
def test_chain_id_is_recovered_from_eip155_v(recovery_id, chain_id):
    v = encode_v(recovery_id, chain_id)

    assert v == recovery_id + 35 + 2 * chain_id
    assert resolve_chain_id(v) == chain_id
    assert extract_recovery_id(v, chain_id) == recovery_id

    v_min, v_max = v_bounds(chain_id)
    assert v_min <= v <= v_max


@given(recovery_id=st.sampled_from((0, 1)))
def test_unprotected_v_round_trip(recovery_id):
    v = encode_v(recovery_id, 0)

    assert resolve_chain_id(v) == 0
    assert extract_recovery_id(v, 0) == recovery_id
    assert v_bounds(0) == (27, 28)
