from typing import (
    Any,
    Optional,
)

from eth_typing import (
    Address,
)
from eth_utils.toolz import (
    merge,
)
import rlp

from eth_tx._utils.numeric import (
    to_quantity,
)
from eth_tx._utils.transactions import (
    encode_v,
    extract_recovery_id,
    resolve_chain_id,
    v_bounds,
)
from eth_tx.constants import (
    BLANK_CHAIN_ID,
)
from eth_tx.rlp.transactions import (
    LEGACY_TRANSACTION_FIELDS,
    legacy_transaction_rlp_items,
)
from eth_tx.typing import (
    RawSignature,
    RLPItem,
)
from eth_tx.validation import (
    validate_canonical_address,
    validate_gte,
    validate_is_bytes,
    validate_lt_secpk1n,
    validate_lte,
    validate_uint64,
    validate_uint256,
)

from .base import (
    SignedTransactionMethods,
    UnsignedTransactionMethods,
)


class SignedLegacyTransaction(rlp.Serializable, SignedTransactionMethods):
    """
    A signed pre-EIP-2718 transaction.

    ``chain_id`` is fixed when the object is built: a non-zero ``chain_id``
    argument is kept as given, a zero one is replaced by the chain id folded
    into ``v`` (if any). See :func:`eth_tx._utils.transactions.resolve_chain_id`.
    It is not one of the RLP fields, but takes part in equality and hashing.
    """

    fields = LEGACY_TRANSACTION_FIELDS

    def __init__(
        self,
        nonce: int,
        gas_price: int,
        gas: int,
        to: Optional[Address],
        value: int,
        data: bytes,
        v: int,
        r: int,
        s: int,
        chain_id: int = BLANK_CHAIN_ID,
    ) -> None:
        super().__init__(nonce, gas_price, gas, to, value, data, v, r, s)
        self._chain_id = resolve_chain_id(v, chain_id)

    @property
    def chain_id(self) -> int:
        return self._chain_id

    @property
    def recovery_id(self) -> int:
        return extract_recovery_id(self.v, self.chain_id)

    # Legacy transactions pay the gas price for both fee components
    @property
    def max_priority_fee_per_gas(self) -> int:
        return self.gas_price

    @property
    def max_fee_per_gas(self) -> int:
        return self.gas_price

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, SignedLegacyTransaction)
            and tuple(self) == tuple(other)
            and self.chain_id == other.chain_id
        )

    def __hash__(self) -> int:
        return hash((tuple(self), self.chain_id))

    def __repr__(self) -> str:
        field_reprs = ", ".join(
            f"{name}={value!r}" for name, value in self.as_dict().items()
        )
        return f"{type(self).__name__}({field_reprs}, chain_id={self.chain_id!r})"

    def copy(self, **overrides: Any) -> "SignedLegacyTransaction":
        chain_id = overrides.pop("chain_id", self.chain_id)
        return type(self)(**merge(self.as_dict(), overrides), chain_id=chain_id)

    def validate(self) -> None:
        validate_uint64(self.nonce, title="Transaction.nonce")
        validate_uint256(self.gas_price, title="Transaction.gas_price")
        validate_uint256(self.gas, title="Transaction.gas")
        if self.to is not None:
            validate_canonical_address(self.to, title="Transaction.to")
        validate_uint256(self.value, title="Transaction.value")
        validate_is_bytes(self.data, title="Transaction.data")

        validate_uint256(self.v, title="Transaction.v")
        validate_uint256(self.r, title="Transaction.r")
        validate_uint256(self.s, title="Transaction.s")

        validate_lt_secpk1n(self.r, title="Transaction.r")
        validate_gte(self.r, minimum=1, title="Transaction.r")
        validate_lt_secpk1n(self.s, title="Transaction.s")
        validate_gte(self.s, minimum=1, title="Transaction.s")

        v_min, v_max = v_bounds(self.chain_id)
        validate_gte(self.v, minimum=v_min, title="Transaction.v")
        validate_lte(self.v, maximum=v_max, title="Transaction.v")

    def get_message_for_signing(self) -> bytes:
        return rlp.encode(
            legacy_transaction_rlp_items(
                self.nonce,
                self.gas_price,
                self.gas,
                self.to,
                self.value,
                self.data,
                v=self.chain_id,
                r=0,
                s=0,
            )
        )

    #
    # RLP
    #
    def as_rlp_item(self) -> RLPItem:
        return legacy_transaction_rlp_items(*self)

    def encode(self) -> bytes:
        return rlp.encode(self)

    @classmethod
    def decode(cls, encoded: bytes) -> "SignedLegacyTransaction":
        """
        The chain id of a decoded transaction is always recovered from ``v``.
        """
        return cls._decode_payload(encoded)


class UnsignedLegacyTransaction(UnsignedTransactionMethods):
    fields = ("nonce", "gas_price", "gas", "from_", "to", "value", "data")
    required_fields = ("nonce", "gas_price", "gas", "value")

    def __init__(
        self,
        nonce: int = None,
        gas_price: int = None,
        gas: int = None,
        from_: Address = None,
        to: Address = None,
        value: int = None,
        data: bytes = b"",
    ) -> None:
        self.nonce = nonce
        self.gas_price = gas_price
        self.gas = gas
        self.from_ = from_
        self.to = to
        self.value = value
        self.data = data

    def get_message_for_signing(self, chain_id: int) -> bytes:
        self.validate()
        return rlp.encode(
            legacy_transaction_rlp_items(
                self.nonce,
                self.gas_price,
                self.gas,
                self.to,
                self.value,
                self.data,
                v=chain_id,
                r=0,
                s=0,
            )
        )

    def as_signed_transaction_from_signature(
        self, signature: RawSignature, chain_id: int
    ) -> SignedLegacyTransaction:
        self.validate()
        recovery_id, r, s = signature
        return SignedLegacyTransaction(
            nonce=self.nonce,
            gas_price=self.gas_price,
            gas=self.gas,
            to=self.to,
            value=self.value,
            data=self.data,
            v=encode_v(recovery_id, chain_id),
            r=to_quantity(r),
            s=to_quantity(s),
            chain_id=chain_id,
        )
