from typing import (
    Any,
    Dict,
    Tuple,
    Type,
    TypeVar,
)

from cached_property import (
    cached_property,
)
from eth_hash.auto import (
    keccak,
)
from eth_keys.datatypes import (
    PrivateKey,
)
from eth_typing import (
    Address,
    Hash32,
)
from eth_utils import (
    ExtendedDebugLogger,
    ValidationError,
    decode_hex,
    encode_hex,
    get_extended_debug_logger,
)
import rlp
from rlp.exceptions import (
    RLPException,
)

from eth_tx._utils.transactions import (
    create_message_signature,
    extract_message_sender,
    recover_public_key,
)
from eth_tx.abc import (
    SignedTransactionAPI,
    UnsignedTransactionAPI,
)
from eth_tx.exceptions import (
    IncompleteTransaction,
    MalformedRlpItem,
)
from eth_tx.typing import (
    RLPItem,
)

TSignedTransactionMethods = TypeVar(
    "TSignedTransactionMethods", bound="SignedTransactionMethods"
)


class BaseTransactionMethods:
    @property
    def logger(self) -> ExtendedDebugLogger:
        return get_extended_debug_logger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )


class UnsignedTransactionMethods(BaseTransactionMethods, UnsignedTransactionAPI):
    """
    Structural equality, hashing and ``repr`` over the names in ``fields``,
    compared in declaration order, plus the completeness check run before
    signing.
    """

    fields: Tuple[str, ...] = ()
    # fields which must be set before the transaction can be signed
    required_fields: Tuple[str, ...] = ()

    def _field_values(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.fields)

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.fields}

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._field_values() == other._field_values()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._field_values())

    def __repr__(self) -> str:
        field_reprs = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in self.fields
        )
        return f"{self.__class__.__name__}({field_reprs})"

    @property
    def missing_fields(self) -> Tuple[str, ...]:
        return tuple(
            name for name in self.required_fields if getattr(self, name) is None
        )

    def validate(self) -> None:
        missing_fields = self.missing_fields
        if missing_fields:
            raise IncompleteTransaction(
                missing_fields,
                f"{self.__class__.__name__} is missing {', '.join(missing_fields)}",
            )

    def as_signed_transaction(
        self, private_key: PrivateKey, chain_id: int
    ) -> SignedTransactionAPI:
        message = self.get_message_for_signing(chain_id)
        signature = create_message_signature(message, private_key)
        self.logger.debug2(
            "Signed %s for chain %d with recovery id %d",
            self,
            chain_id,
            signature[0],
        )
        return self.as_signed_transaction_from_signature(signature, chain_id)


class SignedTransactionMethods(BaseTransactionMethods, SignedTransactionAPI):
    """
    Behavior shared by every signed transaction shape. Subclasses are
    ``rlp.Serializable``, which supplies the read-only fields, ``as_dict``
    and ``copy``.
    """

    @cached_property
    def sender(self) -> Address:
        return self.get_sender()

    @cached_property
    def hash(self) -> Hash32:
        return Hash32(keccak(self.encode()))

    def get_sender(self) -> Address:
        return extract_message_sender(
            self.get_message_for_signing(), self.recovery_id, self.r, self.s
        )

    #
    # Signature
    #
    def check_signature_validity(self) -> None:
        if not self.verify_signature():
            raise ValidationError(f"Invalid Signature on {self!r}")

    def verify_signature(self, sender: Address = None) -> bool:
        try:
            message = self.get_message_for_signing()
        except (RLPException, TypeError) as err:
            self.logger.debug2(
                "Cannot rebuild message for signing of %s: %s", self, err
            )
            return False

        public_key = recover_public_key(message, self.recovery_id, self.r, self.s)
        if public_key is None:
            self.logger.debug2("No public key recoverable from signature of %s", self)
            return False
        elif sender is not None and public_key.to_canonical_address() != sender:
            self.logger.debug2(
                "Signature of %s recovers %s, not %s",
                self,
                public_key.to_checksum_address(),
                encode_hex(sender),
            )
            return False
        else:
            return True

    #
    # Encoding
    #
    def as_raw_transaction(self) -> str:
        try:
            encoded = self.encode()
        except (RLPException, TypeError) as err:
            self.logger.warning(
                "Unable to encode %r, falling back to an empty raw transaction: %s",
                self,
                err,
            )
            return "0x"
        return encode_hex(encoded)

    @classmethod
    def from_rlp_item(
        cls: Type[TSignedTransactionMethods], item: RLPItem
    ) -> TSignedTransactionMethods:
        try:
            return cls.deserialize(item)  # type: ignore
        except rlp.DeserializationError as err:
            raise MalformedRlpItem(f"Malformed {cls.__name__} item: {err}") from err

    @classmethod
    def _decode_payload(
        cls: Type[TSignedTransactionMethods], payload: bytes
    ) -> TSignedTransactionMethods:
        try:
            return rlp.decode(payload, sedes=cls)
        except (rlp.DecodingError, rlp.DeserializationError) as err:
            raise MalformedRlpItem(f"Cannot decode {cls.__name__}: {err}") from err

    @classmethod
    def from_raw_transaction(
        cls: Type[TSignedTransactionMethods], raw_transaction: str
    ) -> TSignedTransactionMethods:
        try:
            encoded = decode_hex(raw_transaction)
        except ValueError as err:
            raise MalformedRlpItem(
                f"Raw transaction is not valid hex: {raw_transaction!r}"
            ) from err
        return cls.decode(encoded)
