"""The three toy ciphers and the in-place file rewriters that use them."""

from __future__ import annotations

import logging
from typing import Callable

from filecrypt.task import Action, Task

log = logging.getLogger(__name__)

CAESAR_SHIFT = 3

RSA_P = 17
RSA_Q = 11
RSA_MODULUS = RSA_P * RSA_Q
RSA_PHI = (RSA_P - 1) * (RSA_Q - 1)
RSA_PUBLIC_EXPONENT = 7

XOR_KEY = 0xAA


def shift_char(byte: int, shift: int) -> int:
    """Shift an ASCII letter within its case; other bytes are returned unchanged."""
    if ord("a") <= byte <= ord("z"):
        return (byte - ord("a") + shift + 26) % 26 + ord("a")
    if ord("A") <= byte <= ord("Z"):
        return (byte - ord("A") + shift + 26) % 26 + ord("A")
    return byte


def caesar(data: bytes, action: Action) -> bytes:
    """Apply the classic shift-by-three Caesar cipher."""
    shift = CAESAR_SHIFT if action is Action.ENCRYPT else -CAESAR_SHIFT
    return bytes(shift_char(byte, shift) for byte in data)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def mod_inverse(e: int, phi: int) -> int:
    """Smallest ``d`` in ``[1, phi)`` with ``e*d % phi == 1``; ``ValueError`` if none."""
    for d in range(1, phi):
        if (e * d) % phi == 1:
            return d
    raise ValueError(f"{e} has no inverse modulo {phi}")


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Modular exponentiation by repeated squaring."""
    result = 1
    base %= mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp //= 2
    return result


def rsa(data: bytes, action: Action) -> bytes:
    """Apply byte-wise textbook RSA; bytes not below the modulus are kept as they are."""
    exponent = (
        RSA_PUBLIC_EXPONENT
        if action is Action.ENCRYPT
        else mod_inverse(RSA_PUBLIC_EXPONENT, RSA_PHI)
    )
    out = bytearray()
    for value in data:
        if value >= RSA_MODULUS:
            log.warning("byte %d exceeds modulus %d, skipping", value, RSA_MODULUS)
            out.append(value)
        else:
            out.append(mod_pow(value, exponent, RSA_MODULUS))
    return bytes(out)


def xor(data: bytes) -> bytes:
    """XOR every byte with the fixed key; the operation is its own inverse."""
    return bytes(byte ^ XOR_KEY for byte in data)


def _rewrite(task_data: str, transform: Callable[[bytes, Action], bytes]) -> None:
    task = Task.from_string(task_data)
    with task.open() as stream:
        data = stream.read()
        stream.seek(0)
        stream.write(transform(data, task.action))


def execute_caesar(task_data: str) -> None:
    """Rewrite the file named by the task string with the Caesar cipher."""
    _rewrite(task_data, caesar)


def execute_rsa(task_data: str) -> None:
    """Rewrite the file named by the task string with byte-wise RSA."""
    _rewrite(task_data, rsa)


def execute_xor(task_data: str) -> None:
    """Rewrite the file named by the task string with the XOR cipher."""
    _rewrite(task_data, lambda data, _action: xor(data))