import math
from pathlib import Path

import pytest

from filecrypt.ciphers import (
    RSA_MODULUS,
    RSA_PHI,
    RSA_PUBLIC_EXPONENT,
    XOR_KEY,
    caesar,
    execute_caesar,
    execute_rsa,
    execute_xor,
    gcd,
    mod_inverse,
    mod_pow,
    rsa,
    shift_char,
    xor,
)
from filecrypt.task import Action, Algorithm, Task, TaskFormatError

ALL_BYTES = bytes(range(256))


def test_caesar_worked_example() -> None:
    assert caesar(b"abc", Action.ENCRYPT) == b"def"


def test_shift_char_wraps_around() -> None:
    assert shift_char(ord("z"), 3) == ord("c")


def test_shift_char_keeps_non_letters() -> None:
    for byte in b"0129 !@#\n\xff":
        assert shift_char(byte, 3) == byte


def test_caesar_round_trip_all_bytes() -> None:
    encrypted = caesar(ALL_BYTES, Action.ENCRYPT)
    assert len(encrypted) == len(ALL_BYTES)
    assert caesar(encrypted, Action.DECRYPT) == ALL_BYTES


def test_caesar_preserves_case() -> None:
    encrypted = caesar(b"Hello World", Action.ENCRYPT)
    assert [chr(b).isupper() for b in encrypted] == [chr(b).isupper() for b in b"Hello World"]


@pytest.mark.parametrize("a, b", [(12, 18), (160, 7), (0, 5), (81, 27), (17, 11)])
def test_gcd_matches_math(a: int, b: int) -> None:
    assert gcd(a, b) == math.gcd(a, b)


def test_mod_inverse_of_key() -> None:
    assert mod_inverse(RSA_PUBLIC_EXPONENT, RSA_PHI) == 23


def test_mod_inverse_property() -> None:
    d = mod_inverse(RSA_PUBLIC_EXPONENT, RSA_PHI)
    assert (RSA_PUBLIC_EXPONENT * d) % RSA_PHI == 1


def test_mod_inverse_missing_raises() -> None:
    with pytest.raises(ValueError):
        mod_inverse(4, 8)


@pytest.mark.parametrize("base, exp", [(2, 10), (65, 7), (186, 23), (0, 5), (300, 3)])
def test_mod_pow_matches_builtin(base: int, exp: int) -> None:
    assert mod_pow(base, exp, RSA_MODULUS) == pow(base, exp, RSA_MODULUS)


def test_rsa_round_trip_all_bytes() -> None:
    encrypted = rsa(ALL_BYTES, Action.ENCRYPT)
    assert rsa(encrypted, Action.DECRYPT) == ALL_BYTES


def test_rsa_keeps_bytes_above_modulus() -> None:
    high = bytes(range(RSA_MODULUS, 256))
    assert rsa(high, Action.ENCRYPT) == high
    assert rsa(high, Action.DECRYPT) == high


def test_rsa_encrypt_matches_textbook_formula() -> None:
    encrypted = rsa(b"A", Action.ENCRYPT)
    assert encrypted == bytes([pow(ord("A"), RSA_PUBLIC_EXPONENT, RSA_MODULUS)])


def test_xor_uses_fixed_key() -> None:
    assert xor(b"\x00") == bytes([XOR_KEY])
    assert xor(b"\x00") == b"\xaa"


def test_xor_is_involution() -> None:
    assert xor(xor(ALL_BYTES)) == ALL_BYTES


@pytest.mark.parametrize(
    "execute, algorithm",
    [(execute_caesar, Algorithm.CAESAR), (execute_rsa, Algorithm.RSA), (execute_xor, Algorithm.XOR)],
)
def test_execute_round_trip_on_file(tmp_path: Path, execute, algorithm: Algorithm) -> None:
    target = tmp_path / "file.bin"
    target.write_bytes(ALL_BYTES)
    execute(Task(str(target), Action.ENCRYPT, algorithm).to_string())
    assert len(target.read_bytes()) == len(ALL_BYTES)
    execute(Task(str(target), Action.DECRYPT, algorithm).to_string())
    assert target.read_bytes() == ALL_BYTES


def test_execute_caesar_writes_cipher_text(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_bytes(b"Attack at dawn!")
    execute_caesar(Task(str(target), Action.ENCRYPT, Algorithm.CAESAR).to_string())
    assert target.read_bytes() == caesar(b"Attack at dawn!", Action.ENCRYPT)


def test_execute_missing_file_raises(tmp_path: Path) -> None:
    task = Task(str(tmp_path / "gone.txt"), Action.ENCRYPT, Algorithm.XOR)
    with pytest.raises(OSError):
        execute_xor(task.to_string())


def test_execute_malformed_task_raises() -> None:
    with pytest.raises(TaskFormatError):
        execute_rsa("no separators here")