"""
Field layouts of the transaction RLP lists, and the item lists handed to
``rlp.encode`` when building the payload to sign.

Every position is fixed: a legacy transaction is always the nine items
``[nonce, gas_price, gas, to, value, data, v, r, s]``, and the same list
with ``v`` replaced by the chain id and ``r = s = 0`` is what gets signed.
"""
from typing import (
    List,
    Optional,
)

from eth_typing import (
    Address,
)
from rlp.sedes import (
    binary,
)

from eth_tx._utils.transactions import (
    to_rlp_address,
)
from eth_tx.typing import (
    AccessList,
    RLPItem,
)

from .sedes import (
    access_list as access_list_sedes,
    quantity,
    recipient,
)

LEGACY_TRANSACTION_FIELDS = [
    ("nonce", quantity),
    ("gas_price", quantity),
    ("gas", quantity),
    ("to", recipient),
    ("value", quantity),
    ("data", binary),
    ("v", quantity),
    ("r", quantity),
    ("s", quantity),
]

UNSIGNED_DYNAMIC_FEE_TRANSACTION_FIELDS = [
    ("chain_id", quantity),
    ("nonce", quantity),
    ("max_priority_fee_per_gas", quantity),
    ("max_fee_per_gas", quantity),
    ("gas", quantity),
    ("to", recipient),
    ("value", quantity),
    ("data", binary),
    ("access_list", access_list_sedes),
]

DYNAMIC_FEE_TRANSACTION_FIELDS = UNSIGNED_DYNAMIC_FEE_TRANSACTION_FIELDS + [
    ("y_parity", quantity),
    ("r", quantity),
    ("s", quantity),
]


def legacy_transaction_rlp_items(
    nonce: int,
    gas_price: int,
    gas: int,
    to: Optional[Address],
    value: int,
    data: bytes,
    v: int,
    r: int,
    s: int,
) -> List[RLPItem]:
    return [nonce, gas_price, gas, to_rlp_address(to), value, data, v, r, s]


def dynamic_fee_transaction_rlp_items(
    chain_id: int,
    nonce: int,
    max_priority_fee_per_gas: int,
    max_fee_per_gas: int,
    gas: int,
    to: Optional[Address],
    value: int,
    data: bytes,
    access_list: AccessList,
) -> List[RLPItem]:
    return [
        chain_id,
        nonce,
        max_priority_fee_per_gas,
        max_fee_per_gas,
        gas,
        to_rlp_address(to),
        value,
        data,
        access_list_sedes.serialize(access_list),
    ]
