import functools
from typing import (
    Union,
)

from eth_typing import (
    Address,
)
from eth_utils import (
    ValidationError,
)

from eth_tx.constants import (
    SECPK1_N,
    UINT_64_MAX,
    UINT_256_MAX,
)
from eth_tx.typing import (
    AccessList,
)


def validate_is_bytes(value: bytes, title: str = "Value") -> None:
    if not isinstance(value, bytes):
        raise ValidationError(f"{title} must be a byte string.  Got: {type(value)}")


def validate_is_integer(value: Union[int, bool], title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be a an integer.  Got: {type(value)}")


def validate_gte(value: int, minimum: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value < minimum:
        raise ValidationError(
            f"{title} {value} is not greater than or equal to {minimum}"
        )


def validate_lte(value: int, maximum: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value > maximum:
        raise ValidationError(f"{title} {value} is not less than or equal to {maximum}")


def validate_canonical_address(value: Address, title: str = "Value") -> None:
    if not isinstance(value, bytes) or not len(value) == 20:
        raise ValidationError(f"{title} {value!r} is not a valid canonical address")


def validate_uint256(value: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value < 0:
        raise ValidationError(f"{title} cannot be negative: Got: {value}")
    if value > UINT_256_MAX:
        raise ValidationError(f"{title} exeeds maximum UINT256 size.  Got: {value}")


def validate_uint64(value: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value < 0:
        raise ValidationError(f"{title} cannot be negative: Got: {value}")
    if value > UINT_64_MAX:
        raise ValidationError(f"{title} exeeds maximum UINT64 size.  Got: {value}")


validate_lt_secpk1n = functools.partial(validate_lte, maximum=SECPK1_N - 1)


def validate_is_transaction_access_list(access_list: AccessList) -> None:
    if not isinstance(access_list, (list, tuple)):
        raise ValidationError(
            f"Transaction access_list must be a list or tuple, got: {access_list!r}"
        )
    for index, entry in enumerate(access_list):
        title = f"Transaction.access_list[{index}]"
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValidationError(
                f"{title} must be an (address, storage_keys) pair, got: {entry!r}"
            )
        account, storage_keys = entry
        validate_canonical_address(account, title=f"{title}.account")
        if not isinstance(storage_keys, (list, tuple)):
            raise ValidationError(
                f"{title}.storage_keys must be a list or tuple, got: {storage_keys!r}"
            )
        for storage_key in storage_keys:
            validate_uint256(storage_key, title=f"{title}.storage_key")
