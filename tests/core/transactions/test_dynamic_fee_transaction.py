from eth_utils import (
    ValidationError,
    int_to_big_endian,
)
import pytest
import rlp

from eth_tx import (
    IncompleteTransaction,
    MalformedRlpItem,
    SignedDynamicFeeTransaction,
    UnsignedDynamicFeeTransaction,
)

ACCESS_LIST = [
    (b"\xf0" * 20, [0, 2**256 - 1]),
]


@pytest.fixture
def unsigned_txn(recipient):
    return UnsignedDynamicFeeTransaction(
        nonce=3,
        max_priority_fee_per_gas=2 * 10**9,
        max_fee_per_gas=30 * 10**9,
        gas=25000,
        to=recipient,
        value=10,
        data=b"\x55\x44",
        access_list=ACCESS_LIST,
    )


def test_message_for_signing_is_typed(unsigned_txn, recipient):
    message = unsigned_txn.get_message_for_signing(1)

    assert message[:1] == b"\x02"
    assert rlp.decode(message[1:]) == [
        b"\x01",
        b"\x03",
        int_to_big_endian(2 * 10**9),
        int_to_big_endian(30 * 10**9),
        int_to_big_endian(25000),
        recipient,
        b"\x0a",
        b"\x55\x44",
        [[b"\xf0" * 20, [b"\x00" * 32, b"\xff" * 32]]],
    ]


@pytest.mark.parametrize(
    "missing_field",
    ("nonce", "max_priority_fee_per_gas", "max_fee_per_gas", "gas", "value"),
)
def test_incomplete_transaction_cannot_be_signed(
    unsigned_txn, private_key, missing_field
):
    setattr(unsigned_txn, missing_field, None)

    with pytest.raises(IncompleteTransaction) as excinfo:
        unsigned_txn.get_message_for_signing(1)
    assert excinfo.value.missing_fields == (missing_field,)

    with pytest.raises(IncompleteTransaction):
        unsigned_txn.as_signed_transaction(private_key, chain_id=1)


def test_sign_and_verify(unsigned_txn, private_key, sender):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=1)

    assert signed.chain_id == 1
    assert signed.y_parity in (0, 1)
    assert signed.recovery_id == signed.y_parity
    assert signed.access_list == ((b"\xf0" * 20, (0, 2**256 - 1)),)
    assert signed.verify_signature(sender)
    assert signed.sender == sender
    signed.validate()


def test_round_trip(unsigned_txn, private_key):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=5)
    encoded = signed.encode()

    assert encoded[:1] == b"\x02"
    assert SignedDynamicFeeTransaction.decode(encoded) == signed
    assert (
        SignedDynamicFeeTransaction.from_raw_transaction(signed.as_raw_transaction())
        == signed
    )


def test_contract_creation_round_trip(private_key):
    unsigned = UnsignedDynamicFeeTransaction(
        nonce=0, max_priority_fee_per_gas=1, max_fee_per_gas=2, gas=60000, value=0
    )
    signed = unsigned.as_signed_transaction(private_key, chain_id=1)
    decoded = SignedDynamicFeeTransaction.decode(signed.encode())

    assert decoded.to is None
    assert decoded.access_list == ()
    assert decoded == signed


@pytest.mark.parametrize(
    "overrides",
    (
        {"max_fee_per_gas": 1},
        {"max_priority_fee_per_gas": 1},
        {"chain_id": 2},
        {"access_list": ()},
    ),
)
def test_tampered_transaction_does_not_verify(
    unsigned_txn, private_key, sender, overrides
):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=1)
    assert not signed.copy(**overrides).verify_signature(sender)


def test_bad_y_parity_verifies_false(unsigned_txn, private_key):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=1)
    broken = signed.copy(y_parity=2)

    assert broken.verify_signature() is False
    with pytest.raises(ValidationError):
        broken.validate()


def test_gas_price_is_unavailable(unsigned_txn, private_key):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=1)
    with pytest.raises(AttributeError):
        signed.gas_price


def test_bad_access_list_falls_back_to_empty_raw_transaction(unsigned_txn, private_key):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=1)
    broken = signed.copy(access_list=[(b"\x01", [0])])

    assert broken.as_raw_transaction() == "0x"
    assert broken.verify_signature() is False


@pytest.mark.parametrize(
    "encoded",
    (
        b"",
        b"\x01" + rlp.encode([]),
        b"\x02",
        b"\x02" + rlp.encode([1, 2, 3]),
    ),
)
def test_decode_malformed(encoded):
    with pytest.raises(MalformedRlpItem):
        SignedDynamicFeeTransaction.decode(encoded)


def test_unsigned_hash_with_list_access_list(recipient):
    first = UnsignedDynamicFeeTransaction(
        nonce=0, to=recipient, access_list=ACCESS_LIST
    )
    second = UnsignedDynamicFeeTransaction(
        nonce=0, to=recipient, access_list=[(b"\xf0" * 20, (0, 2**256 - 1))]
    )
    assert first == second
    assert hash(first) == hash(second)


def test_payload_decodes_with_rlp_sedes(unsigned_txn, private_key):
    signed = unsigned_txn.as_signed_transaction(private_key, chain_id=1)
    payload = signed.encode()[1:]
    decoded = rlp.decode(payload, sedes=SignedDynamicFeeTransaction)

    assert decoded == signed
    assert decoded.as_dict()["access_list"] == signed.access_list
    with pytest.raises(AttributeError):
        decoded.max_fee_per_gas = 1
