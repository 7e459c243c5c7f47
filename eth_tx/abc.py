from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    Any,
    Dict,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from eth_keys.datatypes import (
    PrivateKey,
)
from eth_typing import (
    Address,
    Hash32,
)

from eth_tx.typing import (
    RawSignature,
    RLPItem,
)

TSignedTransaction = TypeVar("TSignedTransaction", bound="SignedTransactionAPI")


class UnsignedTransactionAPI(ABC):
    """
    A transaction under construction. Fields stay optional, and are set by
    plain assignment, until the transaction is signed.
    """

    nonce: Optional[int]
    gas: Optional[int]
    from_: Optional[Address]
    to: Optional[Address]
    value: Optional[int]
    data: bytes

    @property
    @abstractmethod
    def missing_fields(self) -> Tuple[str, ...]:
        """
        Names of the required fields that are still unset.
        """
        ...

    @abstractmethod
    def validate(self) -> None:
        """
        Raise :class:`~eth_tx.exceptions.IncompleteTransaction` unless every
        field needed to sign the transaction is set.
        """
        ...

    @abstractmethod
    def get_message_for_signing(self, chain_id: int) -> bytes:
        """
        Return the bytes that get signed for the given ``chain_id``.
        """
        ...

    @abstractmethod
    def as_signed_transaction(
        self, private_key: PrivateKey, chain_id: int
    ) -> "SignedTransactionAPI":
        """
        Return a version of this transaction which has been signed using the
        provided `private_key`
        """
        ...

    @abstractmethod
    def as_signed_transaction_from_signature(
        self, signature: RawSignature, chain_id: int
    ) -> "SignedTransactionAPI":
        """
        Combine this transaction with a ``(recovery_id, r, s)`` signature
        produced elsewhere over :meth:`get_message_for_signing`.
        """
        ...


class SignedTransactionAPI(ABC):
    """
    An immutable, signed transaction.
    """

    @property
    @abstractmethod
    def nonce(self) -> int:
        ...

    @property
    @abstractmethod
    def gas(self) -> int:
        ...

    @property
    @abstractmethod
    def to(self) -> Optional[Address]:
        """
        ``None`` for a contract-creating transaction.
        """
        ...

    @property
    @abstractmethod
    def value(self) -> int:
        ...

    @property
    @abstractmethod
    def data(self) -> bytes:
        ...

    @property
    @abstractmethod
    def r(self) -> int:
        ...

    @property
    @abstractmethod
    def s(self) -> int:
        ...

    @property
    @abstractmethod
    def chain_id(self) -> int:
        ...

    @property
    @abstractmethod
    def recovery_id(self) -> int:
        """
        The 0 or 1 recovery id of the signature, with any chain id removed.
        """
        ...

    @property
    @abstractmethod
    def hash(self) -> Hash32:
        """
        Return the hash of the transaction.
        """
        ...

    @property
    @abstractmethod
    def sender(self) -> Address:
        """
        Convenience and performance property for the return value of `get_sender`
        """
        ...

    @abstractmethod
    def get_sender(self) -> Address:
        """
        Get the 20-byte address which sent this transaction.

        This can be a slow operation. ``transaction.sender`` is always preferred.
        """
        ...

    @abstractmethod
    def get_message_for_signing(self) -> bytes:
        """
        Return the bytestring that should be signed in order to create a signed
        transaction.
        """
        ...

    @abstractmethod
    def validate(self) -> None:
        """
        Check that every field is in range and the signature values fit
        their chain id. Not run on construction: callers invoke it
        explicitly and get a ``ValidationError`` on failure.
        """
        ...

    @abstractmethod
    def check_signature_validity(self) -> None:
        """
        Check if the signature is valid. Raise a ``ValidationError`` if the
        signature is invalid.
        """
        ...

    @abstractmethod
    def verify_signature(self, sender: Address = None) -> bool:
        """
        Return ``True`` if a public key can be recovered from the signature
        over :meth:`get_message_for_signing`, and, if ``sender`` is given,
        that key belongs to ``sender``. Never raises.
        """
        ...

    @abstractmethod
    def as_rlp_item(self) -> RLPItem:
        """
        Return the transaction as the nested list handed to ``rlp.encode``.
        """
        ...

    @abstractmethod
    def encode(self) -> bytes:
        """
        Return the canonical wire bytes of the transaction.
        """
        ...

    @classmethod
    @abstractmethod
    def decode(cls: Type[TSignedTransaction], encoded: bytes) -> TSignedTransaction:
        """
        Parse the canonical wire bytes of a transaction.
        """
        ...

    @abstractmethod
    def as_raw_transaction(self) -> str:
        """
        Return the ``0x``-prefixed hex of :meth:`encode`, or the bare ``"0x"``
        if the transaction cannot be encoded.
        """
        ...

    @abstractmethod
    def as_dict(self) -> Dict[str, Any]:
        ...

    @abstractmethod
    def copy(self: TSignedTransaction, **overrides: Any) -> TSignedTransaction:
        """
        Return a new transaction with the given fields replaced.
        """
        ...
