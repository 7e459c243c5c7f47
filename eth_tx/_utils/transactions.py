from typing import (
    Optional,
    Tuple,
)

from eth_keys import (
    datatypes,
    keys,
)
from eth_keys.exceptions import (
    BadSignature,
)
from eth_typing import (
    Address,
)
from eth_utils import (
    ValidationError,
)

from eth_tx._utils.numeric import (
    is_even,
)
from eth_tx.constants import (
    BLANK_CHAIN_ID,
    CREATE_CONTRACT_ADDRESS,
    EIP155_CHAIN_ID_OFFSET,
    EIP155_V_BASE,
    SECPK1_N,
    V_OFFSET,
)


def encode_v(recovery_id: int, chain_id: int) -> int:
    """
    Fold the signer's recovery id and the chain id into a legacy ``v``.

    A zero chain id yields an unprotected signature (``v`` of 27 or 28),
    anything else follows EIP-155: ``recovery_id + 35 + 2 * chain_id``.
    """
    if chain_id == BLANK_CHAIN_ID:
        return recovery_id + V_OFFSET
    else:
        return recovery_id + V_OFFSET + chain_id * 2 + 8


def resolve_chain_id(v: int, chain_id_hint: int = BLANK_CHAIN_ID) -> int:
    """
    Return the chain id a legacy transaction with the given ``v`` belongs to.

    A non-zero hint always wins. With a zero hint the chain id is read back
    out of ``v`` when ``v`` is at least 37, otherwise the transaction is
    treated as unprotected and the chain id is zero.
    """
    if chain_id_hint != BLANK_CHAIN_ID or v < EIP155_V_BASE:
        return chain_id_hint
    elif is_even(v):
        return (v - EIP155_CHAIN_ID_OFFSET - 1) // 2
    else:
        return (v - EIP155_CHAIN_ID_OFFSET) // 2


def extract_recovery_id(v: int, chain_id: int) -> int:
    if v >= EIP155_CHAIN_ID_OFFSET + 2 * chain_id:
        return v - EIP155_CHAIN_ID_OFFSET - 2 * chain_id
    elif v >= V_OFFSET:
        return v - V_OFFSET
    else:
        return v


def v_bounds(chain_id: int) -> Tuple[int, int]:
    if chain_id == BLANK_CHAIN_ID:
        return V_OFFSET, V_OFFSET + 1
    else:
        minimum = EIP155_CHAIN_ID_OFFSET + 2 * chain_id
        return minimum, minimum + 1


def to_rlp_address(to: Optional[Address]) -> Address:
    if to is None:
        return CREATE_CONTRACT_ADDRESS
    return to


def from_rlp_address(to: bytes) -> Optional[Address]:
    if to == CREATE_CONTRACT_ADDRESS:
        return None
    return Address(to)


def create_message_signature(
    message: bytes, private_key: datatypes.PrivateKey
) -> Tuple[int, int, int]:
    """
    Sign ``message`` and return ``(recovery_id, r, s)``.
    """
    signature = private_key.sign_msg(message)
    return signature.vrs


def recover_public_key(
    message: bytes, recovery_id: int, r: int, s: int
) -> Optional[datatypes.PublicKey]:
    """
    Recover the public key that produced ``(recovery_id, r, s)`` over
    ``message``, or ``None`` if no key can be recovered.
    """
    if recovery_id not in (0, 1):
        return None
    elif not (0 < r < SECPK1_N and 0 < s < SECPK1_N):
        return None

    try:
        signature = keys.Signature(vrs=(recovery_id, r, s))
        return signature.recover_public_key_from_msg(message)
    except BadSignature:
        return None


def extract_message_sender(
    message: bytes, recovery_id: int, r: int, s: int
) -> Address:
    public_key = recover_public_key(message, recovery_id, r, s)
    if public_key is None:
        raise ValidationError(
            f"Bad Signature: cannot recover a public key from recovery id "
            f"{recovery_id}, r={r}, s={s}"
        )
    return Address(public_key.to_canonical_address())
