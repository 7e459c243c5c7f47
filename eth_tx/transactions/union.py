from typing import (
    Any,
    NamedTuple,
    Optional,
    Union,
)

from eth_typing import (
    Address,
)

from .dynamic_fee import (
    UnsignedDynamicFeeTransaction,
)
from .legacy import (
    UnsignedLegacyTransaction,
)

UnsignedTransaction = Union[UnsignedLegacyTransaction, UnsignedDynamicFeeTransaction]


class Call(NamedTuple):
    """
    A read-only projection of a transaction, suitable for ``eth_call`` or
    ``eth_estimateGas``. Carries either ``gas_price`` or the two EIP-1559
    fee fields, never both.
    """

    to: Address
    from_: Optional[Address] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    value: Optional[int] = None
    data: bytes = b""


class AnyTransaction:
    """
    Either an :class:`UnsignedLegacyTransaction` or an
    :class:`UnsignedDynamicFeeTransaction`, read through one set of accessors.
    """

    def __init__(self, transaction: UnsignedTransaction) -> None:
        if not isinstance(
            transaction, (UnsignedLegacyTransaction, UnsignedDynamicFeeTransaction)
        ):
            raise TypeError(
                f"Cannot wrap {type(transaction).__name__}, expected "
                "UnsignedLegacyTransaction or UnsignedDynamicFeeTransaction"
            )
        self.transaction = transaction

    @property
    def is_legacy(self) -> bool:
        return isinstance(self.transaction, UnsignedLegacyTransaction)

    @property
    def nonce(self) -> Optional[int]:
        return self.transaction.nonce

    @property
    def gas(self) -> Optional[int]:
        return self.transaction.gas

    @property
    def from_(self) -> Optional[Address]:
        return self.transaction.from_

    @property
    def to(self) -> Optional[Address]:
        return self.transaction.to

    @property
    def value(self) -> Optional[int]:
        return self.transaction.value

    @property
    def data(self) -> bytes:
        return self.transaction.data

    def as_call(self) -> Optional[Call]:
        """
        Project the transaction onto a :class:`Call`. Returns ``None`` for a
        contract-creating transaction, which has no call target.
        """
        transaction = self.transaction
        if transaction.to is None:
            return None

        if isinstance(transaction, UnsignedLegacyTransaction):
            return Call(
                from_=transaction.from_,
                to=transaction.to,
                gas=transaction.gas,
                gas_price=transaction.gas_price,
                value=transaction.value,
                data=transaction.data,
            )
        elif isinstance(transaction, UnsignedDynamicFeeTransaction):
            return Call(
                from_=transaction.from_,
                to=transaction.to,
                gas=transaction.gas,
                max_priority_fee_per_gas=transaction.max_priority_fee_per_gas,
                max_fee_per_gas=transaction.max_fee_per_gas,
                value=transaction.value,
                data=transaction.data,
            )
        else:
            raise TypeError(f"Unhandled transaction type: {type(transaction)}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AnyTransaction):
            return NotImplemented
        return self.transaction == other.transaction

    def __hash__(self) -> int:
        return hash(self.transaction)

    def __repr__(self) -> str:
        return f"AnyTransaction({self.transaction!r})"
