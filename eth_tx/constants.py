from eth_typing import (
    Address,
)

#
# Integer bounds
#
UINT_64_MAX = 2**64 - 1
UINT_256_MAX = 2**256 - 1

SECPK1_N = 115792089237316195423570985008687907852837564279074904382605163141518161494337  # noqa: E501

#
# Transactions
#
CREATE_CONTRACT_ADDRESS = Address(b"")
BLANK_CHAIN_ID = 0

# Add this offset to y_parity to get "v" for unprotected legacy transactions
V_OFFSET = 27
EIP155_CHAIN_ID_OFFSET = 35
# A decoded "v" at or above this value has a chain id folded into it
EIP155_V_BASE = 37

#
# EIP-2718 typed transactions
#
VALID_TRANSACTION_TYPES = range(0, 0x80)
DYNAMIC_FEE_TRANSACTION_TYPE = 2
