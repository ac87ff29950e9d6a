"""
Interop with the contract test harness.

ABI encoding of values exchanged over the process boundary.
"""

from src.interop.abi import ABI_WORD_SIZE, decode_bool, encode_bool, write_outcome

__all__ = [
    "ABI_WORD_SIZE",
    "decode_bool",
    "encode_bool",
    "write_outcome",
]
