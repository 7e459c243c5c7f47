from importlib.metadata import (
    version as __version,
)

from eth_tx.exceptions import (
    IncompleteTransaction,
    MalformedRlpItem,
    PyEthTxError,
    UnrecognizedTransactionType,
)
from eth_tx.transactions.builder import (
    SignedTransaction,
    decode_transaction,
)
from eth_tx.transactions.dynamic_fee import (
    SignedDynamicFeeTransaction,
    UnsignedDynamicFeeTransaction,
)
from eth_tx.transactions.legacy import (
    SignedLegacyTransaction,
    UnsignedLegacyTransaction,
)
from eth_tx.transactions.union import (
    AnyTransaction,
    Call,
    UnsignedTransaction,
)

__version__ = __version("py-eth-tx")
