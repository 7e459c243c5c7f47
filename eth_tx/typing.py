from typing import (
    Any,
    List,
    Sequence,
    Tuple,
    Union,
)

from eth_typing import (
    Address,
)

# (recovery_id, r, s) as produced by a signer. ``r`` and ``s`` may be
# big-endian byte strings or integers.
RawSignature = Tuple[int, Union[int, bytes], Union[int, bytes]]

AccessList = Sequence[Tuple[Address, Sequence[int]]]

# Nested lists of byte strings and unsigned integers, as consumed by
# ``rlp.encode`` and (byte strings only) produced by ``rlp.decode``.
RLPItem = Union[bytes, int, List[Any]]
