from eth_utils import (
    decode_hex,
    to_bytes,
)
import pytest
import rlp

from eth_tx import (
    MalformedRlpItem,
    SignedDynamicFeeTransaction,
    SignedLegacyTransaction,
    UnrecognizedTransactionType,
    UnsignedDynamicFeeTransaction,
    decode_transaction,
)

UNRECOGNIZED_TRANSACTION_TYPES = tuple(
    to_bytes(val) + rlp.encode([]) for val in range(0, 0x80) if val != 2
)


def test_decode_legacy(txn_fixture):
    encoded = decode_hex(txn_fixture["signed"])
    transaction = decode_transaction(encoded)

    assert isinstance(transaction, SignedLegacyTransaction)
    assert transaction.encode() == encoded


def test_decode_dynamic_fee(private_key):
    unsigned = UnsignedDynamicFeeTransaction(
        nonce=0, max_priority_fee_per_gas=1, max_fee_per_gas=2, gas=21000, value=0
    )
    signed = unsigned.as_signed_transaction(private_key, chain_id=1)
    transaction = decode_transaction(signed.encode())

    assert isinstance(transaction, SignedDynamicFeeTransaction)
    assert transaction == signed


@pytest.mark.parametrize("encoded", UNRECOGNIZED_TRANSACTION_TYPES)
def test_unrecognized_transaction_type(encoded):
    with pytest.raises(UnrecognizedTransactionType) as excinfo:
        decode_transaction(encoded)
    assert excinfo.value.type_int == encoded[0]


@pytest.mark.parametrize(
    "encoded",
    (
        b"",
        rlp.encode(b"\x01\x02"),
        rlp.encode([]),
    ),
)
def test_malformed_transaction(encoded):
    with pytest.raises(MalformedRlpItem):
        decode_transaction(encoded)
