from typing import (
    Any,
    Optional,
)

from eth_typing import (
    Address,
)
from rlp.exceptions import (
    DeserializationError,
    SerializationError,
)
from rlp.sedes import (
    BigEndianInt,
    Binary,
    CountableList,
    List,
    binary,
)

from eth_tx._utils.transactions import (
    from_rlp_address,
    to_rlp_address,
)


class Quantity(BigEndianInt):
    """
    ``big_endian_int`` for item trees that may already hold integer leaves.
    Nested lists are rejected instead of being read as numbers.
    """

    def deserialize(self, serial: Any) -> int:
        if isinstance(serial, int) and not isinstance(serial, bool):
            try:
                serial = self.serialize(serial)
            except SerializationError as err:
                raise DeserializationError(str(err), serial) from err
        return super().deserialize(binary.deserialize(serial))


class RecipientAddress:
    """
    A 20 byte address, with ``None`` standing in for the empty string that
    marks a contract creation.
    """

    def serialize(self, obj: Optional[Address]) -> bytes:
        return address.serialize(to_rlp_address(obj))

    def deserialize(self, serial: Any) -> Optional[Address]:
        return from_rlp_address(address.deserialize(serial))


address = Binary.fixed_length(20, allow_empty=True)
canonical_address = Binary.fixed_length(20)
storage_key = BigEndianInt(32)

quantity = Quantity()
recipient = RecipientAddress()

access_list = CountableList(
    List([canonical_address, CountableList(storage_key)]),
)
