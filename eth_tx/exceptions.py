from typing import (
    Tuple,
)


class PyEthTxError(Exception):
    """
    Base class for all py-eth-tx errors.
    """


class IncompleteTransaction(PyEthTxError):
    """
    Raised when an unsigned transaction is missing one of the fields
    required to build its message for signing.
    """

    @property
    def missing_fields(self) -> Tuple[str, ...]:
        return self.args[0]


class MalformedRlpItem(PyEthTxError):
    """
    Raised when a decoded RLP item does not have the shape or element types
    of a signed transaction.
    """


class UnrecognizedTransactionType(PyEthTxError):
    """
    Raised when an encoded transaction is using a first byte that is valid, but
    unrecognized. According to EIP 2718, the byte may be in the range [0, 0x7f].
    Only 0x02 from EIP 1559 is understood here.
    """

    @property
    def type_int(self) -> int:
        return self.args[0]
