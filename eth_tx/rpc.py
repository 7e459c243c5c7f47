"""
Translation between transactions and the ``0x``-hex dictionaries used by
Ethereum JSON-RPC.
"""
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Union,
)

from eth_typing import (
    Address,
)
from eth_utils import (
    ValidationError,
    apply_formatters_to_dict,
    decode_hex,
    encode_hex,
    to_canonical_address,
)
from eth_utils.toolz import (
    valfilter,
)

from eth_tx.transactions.builder import (
    SignedTransaction,
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
    Call,
    UnsignedTransaction,
)
from eth_tx.typing import (
    AccessList,
)


def hexstr_to_int(value: Union[str, int]) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(value, base=16)
    except ValueError as err:
        raise ValidationError(f"Not a hex encoded quantity: {value!r}") from err


def encode_address(address: Optional[Address]) -> Optional[str]:
    if address is None:
        return None
    return encode_hex(address)


def normalize_address(value: str) -> Optional[Address]:
    if value in ("", "0x"):
        return None
    return Address(to_canonical_address(value))


def access_list_to_dicts(access_list: AccessList) -> List[Dict[str, Any]]:
    return [
        {
            "address": encode_hex(account),
            "storageKeys": [
                encode_hex(storage_key.to_bytes(32, "big"))
                for storage_key in storage_keys
            ],
        }
        for account, storage_keys in access_list
    ]


def normalize_access_list(access_list: List[Dict[str, Any]]) -> AccessList:
    return [
        (
            Address(to_canonical_address(entry["address"])),
            [hexstr_to_int(storage_key) for storage_key in entry["storageKeys"]],
        )
        for entry in access_list
    ]


CALL_FORMATTERS = {
    "from": encode_hex,
    "to": encode_hex,
    "gas": hex,
    "gasPrice": hex,
    "maxPriorityFeePerGas": hex,
    "maxFeePerGas": hex,
    "value": hex,
    "data": encode_hex,
}


def call_to_dict(call: Call) -> Dict[str, str]:
    call_dict = {
        "from": call.from_,
        "to": call.to,
        "gas": call.gas,
        "gasPrice": call.gas_price,
        "maxPriorityFeePerGas": call.max_priority_fee_per_gas,
        "maxFeePerGas": call.max_fee_per_gas,
        "value": call.value,
        "data": call.data,
    }
    return apply_formatters_to_dict(
        CALL_FORMATTERS,
        valfilter(lambda value: value is not None, call_dict),
    )


def transaction_to_dict(transaction: SignedTransaction) -> Dict[str, Any]:
    transaction_dict: Dict[str, Any] = dict(
        hash=encode_hex(transaction.hash),
        nonce=hex(transaction.nonce),
        gas=hex(transaction.gas),
        to=encode_address(transaction.to),
        value=hex(transaction.value),
        input=encode_hex(transaction.data),
        r=hex(transaction.r),
        s=hex(transaction.s),
        chainId=hex(transaction.chain_id),
    )

    if isinstance(transaction, SignedLegacyTransaction):
        transaction_dict.update(
            type=hex(0),
            gasPrice=hex(transaction.gas_price),
            v=hex(transaction.v),
        )
    elif isinstance(transaction, SignedDynamicFeeTransaction):
        transaction_dict.update(
            type=hex(transaction.type_id),
            maxPriorityFeePerGas=hex(transaction.max_priority_fee_per_gas),
            maxFeePerGas=hex(transaction.max_fee_per_gas),
            accessList=access_list_to_dicts(transaction.access_list),
            yParity=hex(transaction.y_parity),
            v=hex(transaction.y_parity),
        )
    else:
        raise TypeError(f"Unhandled transaction type: {type(transaction)}")

    return transaction_dict


TRANSACTION_NORMALIZER = {
    "accessList": normalize_access_list,
    "data": decode_hex,
    "from": normalize_address,
    "gas": hexstr_to_int,
    "gasPrice": hexstr_to_int,
    "input": decode_hex,
    "maxFeePerGas": hexstr_to_int,
    "maxPriorityFeePerGas": hexstr_to_int,
    "nonce": hexstr_to_int,
    "to": normalize_address,
    "value": hexstr_to_int,
}

DYNAMIC_FEE_KEYS = {"maxFeePerGas", "maxPriorityFeePerGas"}


def normalize_transaction_dict(transaction_dict: Dict[str, Any]) -> UnsignedTransaction:
    """
    Build an unsigned transaction from a JSON-RPC transaction object, as
    passed to ``eth_sendTransaction``. The presence of either EIP-1559 fee
    field selects :class:`UnsignedDynamicFeeTransaction`.
    """
    normalized = apply_formatters_to_dict(
        TRANSACTION_NORMALIZER,
        valfilter(lambda value: value is not None, transaction_dict),
    )
    data = normalized.get("data", normalized.get("input", b""))

    if DYNAMIC_FEE_KEYS.intersection(normalized):
        if "gasPrice" in normalized:
            raise ValidationError(
                "Transaction cannot set both gasPrice and the EIP-1559 fee fields"
            )
        return UnsignedDynamicFeeTransaction(
            nonce=normalized.get("nonce"),
            max_priority_fee_per_gas=normalized.get("maxPriorityFeePerGas"),
            max_fee_per_gas=normalized.get("maxFeePerGas"),
            gas=normalized.get("gas"),
            from_=normalized.get("from"),
            to=normalized.get("to"),
            value=normalized.get("value"),
            data=data,
            access_list=normalized.get("accessList", ()),
        )
    else:
        return UnsignedLegacyTransaction(
            nonce=normalized.get("nonce"),
            gas_price=normalized.get("gasPrice"),
            gas=normalized.get("gas"),
            from_=normalized.get("from"),
            to=normalized.get("to"),
            value=normalized.get("value"),
            data=data,
        )
