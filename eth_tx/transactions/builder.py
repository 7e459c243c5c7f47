from typing import (
    Union,
)

from eth_tx.constants import (
    DYNAMIC_FEE_TRANSACTION_TYPE,
    VALID_TRANSACTION_TYPES,
)
from eth_tx.exceptions import (
    MalformedRlpItem,
    UnrecognizedTransactionType,
)

from .dynamic_fee import (
    SignedDynamicFeeTransaction,
)
from .legacy import (
    SignedLegacyTransaction,
)

SignedTransaction = Union[SignedLegacyTransaction, SignedDynamicFeeTransaction]


def decode_transaction(encoded: bytes) -> SignedTransaction:
    """
    Decode either a legacy RLP list or an EIP-2718 typed transaction,
    dispatching on the first byte.
    """
    if len(encoded) == 0:
        raise MalformedRlpItem("Encoded transaction was empty, which makes it invalid")

    type_id = encoded[0]
    if type_id == DYNAMIC_FEE_TRANSACTION_TYPE:
        return SignedDynamicFeeTransaction.decode(encoded)
    elif type_id in VALID_TRANSACTION_TYPES:
        raise UnrecognizedTransactionType(type_id, "Unknown transaction type")
    else:
        return SignedLegacyTransaction.decode(encoded)
