from typing import (
    Union,
)

from eth_utils import (
    big_endian_to_int,
)


def is_even(value: int) -> bool:
    return value % 2 == 0


def to_quantity(value: Union[int, bytes]) -> int:
    """
    Signers hand back ``r`` and ``s`` either as integers or as big-endian
    byte strings.
    """
    if isinstance(value, bytes):
        return big_endian_to_int(value)
    return value
