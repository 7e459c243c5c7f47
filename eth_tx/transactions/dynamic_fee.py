from typing import (
    Any,
    List,
    Sequence,
    Tuple,
)

from eth_typing import (
    Address,
)
from eth_utils import (
    to_bytes,
)
import rlp

from eth_tx._utils.numeric import (
    to_quantity,
)
from eth_tx.constants import (
    DYNAMIC_FEE_TRANSACTION_TYPE,
)
from eth_tx.exceptions import (
    MalformedRlpItem,
)
from eth_tx.rlp.transactions import (
    DYNAMIC_FEE_TRANSACTION_FIELDS,
    dynamic_fee_transaction_rlp_items,
)
from eth_tx.typing import (
    AccessList,
    RawSignature,
    RLPItem,
)
from eth_tx.validation import (
    validate_canonical_address,
    validate_gte,
    validate_is_bytes,
    validate_is_transaction_access_list,
    validate_lt_secpk1n,
    validate_lte,
    validate_uint64,
    validate_uint256,
)

from .base import (
    SignedTransactionMethods,
    UnsignedTransactionMethods,
)

DYNAMIC_FEE_TYPE_BYTE = to_bytes(DYNAMIC_FEE_TRANSACTION_TYPE)


def normalize_access_list(
    access_list: AccessList,
) -> Tuple[Tuple[Address, Tuple[int, ...]], ...]:
    return tuple(
        (account, tuple(storage_keys)) for account, storage_keys in access_list
    )


class SignedDynamicFeeTransaction(rlp.Serializable, SignedTransactionMethods):
    """
    A signed EIP-1559 transaction, encoded as ``0x02 || rlp([...])``.
    """

    _type_id = DYNAMIC_FEE_TRANSACTION_TYPE

    fields = DYNAMIC_FEE_TRANSACTION_FIELDS

    @property
    def type_id(self) -> int:
        return self._type_id

    @property
    def recovery_id(self) -> int:
        return self.y_parity

    @property
    def gas_price(self) -> None:
        raise AttributeError(
            "Gas price is no longer available. "
            "See max_priority_fee_per_gas or max_fee_per_gas"
        )

    def validate(self) -> None:
        validate_uint256(self.chain_id, title="Transaction.chain_id")
        validate_uint64(self.nonce, title="Transaction.nonce")
        validate_uint256(
            self.max_priority_fee_per_gas, title="Transaction.max_priority_fee_per_gas"
        )
        validate_uint256(self.max_fee_per_gas, title="Transaction.max_fee_per_gas")
        validate_uint256(self.gas, title="Transaction.gas")
        if self.to is not None:
            validate_canonical_address(self.to, title="Transaction.to")
        validate_uint256(self.value, title="Transaction.value")
        validate_is_bytes(self.data, title="Transaction.data")
        validate_is_transaction_access_list(self.access_list)

        validate_gte(self.y_parity, minimum=0, title="Transaction.y_parity")
        validate_lte(self.y_parity, maximum=1, title="Transaction.y_parity")
        validate_lt_secpk1n(self.r, title="Transaction.r")
        validate_gte(self.r, minimum=1, title="Transaction.r")
        validate_lt_secpk1n(self.s, title="Transaction.s")
        validate_gte(self.s, minimum=1, title="Transaction.s")

    def _unsigned_rlp_items(self) -> List[RLPItem]:
        return dynamic_fee_transaction_rlp_items(*self[:-3])

    def get_message_for_signing(self) -> bytes:
        return DYNAMIC_FEE_TYPE_BYTE + rlp.encode(self._unsigned_rlp_items())

    #
    # RLP
    #
    def as_rlp_item(self) -> RLPItem:
        return self._unsigned_rlp_items() + [self.y_parity, self.r, self.s]

    def encode(self) -> bytes:
        return DYNAMIC_FEE_TYPE_BYTE + rlp.encode(self)

    @classmethod
    def decode(cls, encoded: bytes) -> "SignedDynamicFeeTransaction":
        if encoded[:1] != DYNAMIC_FEE_TYPE_BYTE:
            raise MalformedRlpItem(
                f"Expected a transaction of type {DYNAMIC_FEE_TRANSACTION_TYPE}, "
                f"got {encoded[:1]!r}"
            )
        return cls._decode_payload(encoded[1:])


class UnsignedDynamicFeeTransaction(UnsignedTransactionMethods):
    fields = (
        "nonce",
        "max_priority_fee_per_gas",
        "max_fee_per_gas",
        "gas",
        "from_",
        "to",
        "value",
        "data",
        "access_list",
    )
    required_fields = (
        "nonce",
        "max_priority_fee_per_gas",
        "max_fee_per_gas",
        "gas",
        "value",
    )

    def __init__(
        self,
        nonce: int = None,
        max_priority_fee_per_gas: int = None,
        max_fee_per_gas: int = None,
        gas: int = None,
        from_: Address = None,
        to: Address = None,
        value: int = None,
        data: bytes = b"",
        access_list: AccessList = (),
    ) -> None:
        self.nonce = nonce
        self.max_priority_fee_per_gas = max_priority_fee_per_gas
        self.max_fee_per_gas = max_fee_per_gas
        self.gas = gas
        self.from_ = from_
        self.to = to
        self.value = value
        self.data = data
        self.access_list: Sequence[Tuple[Address, Sequence[int]]] = access_list

    def _field_values(self) -> Tuple[Any, ...]:
        # access lists may be built from (unhashable) lists
        values = super()._field_values()
        return values[:-1] + (normalize_access_list(self.access_list),)

    def get_message_for_signing(self, chain_id: int) -> bytes:
        self.validate()
        return DYNAMIC_FEE_TYPE_BYTE + rlp.encode(
            dynamic_fee_transaction_rlp_items(
                chain_id,
                self.nonce,
                self.max_priority_fee_per_gas,
                self.max_fee_per_gas,
                self.gas,
                self.to,
                self.value,
                self.data,
                self.access_list,
            )
        )

    def as_signed_transaction_from_signature(
        self, signature: RawSignature, chain_id: int
    ) -> SignedDynamicFeeTransaction:
        self.validate()
        y_parity, r, s = signature
        return SignedDynamicFeeTransaction(
            chain_id=chain_id,
            nonce=self.nonce,
            max_priority_fee_per_gas=self.max_priority_fee_per_gas,
            max_fee_per_gas=self.max_fee_per_gas,
            gas=self.gas,
            to=self.to,
            value=self.value,
            data=self.data,
            access_list=normalize_access_list(self.access_list),
            y_parity=y_parity,
            r=to_quantity(r),
            s=to_quantity(s),
        )
