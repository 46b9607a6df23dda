# filecrypt

filecrypt is a small library of toy ciphers. It can also rewrite a file in
place with one of them. Three algorithms are available:

- **caesar**: shifts ASCII letters by 3 and keeps their case. Encryption
  shifts forward and decryption shifts back. All other bytes stay the same.
- **rsa**: a small teaching RSA with fixed keys (p = 17, q = 11, e = 7, so
  n = 187). Each byte below 187 is raised to the key power modulo n. Bytes of
  187 or more are left unchanged, and a warning is logged.
- **xor**: XORs every byte with `0xAA`. Running it a second time restores the
  original.

These ciphers are for learning and experiment. They give no real protection.

## Installation

```
pip install .
```

## Byte transforms

`filecrypt.ciphers` holds the transforms:

```python
from filecrypt.ciphers import caesar, rsa, xor
from filecrypt.task import Action

secret = caesar(b"Hello", Action.ENCRYPT)   # b"Khoor"
plain = caesar(secret, Action.DECRYPT)      # b"Hello"
assert rsa(rsa(b"abc", Action.ENCRYPT), Action.DECRYPT) == b"abc"
assert xor(xor(b"data")) == b"data"
```

The module also provides the helpers it uses: `shift_char`, `gcd`,
`mod_inverse` and `mod_pow`. `mod_inverse` raises `ValueError` when no inverse
exists.

## Tasks and in-place rewriting

A `filecrypt.task.Task` names a file, an `Action` (`ENCRYPT` or `DECRYPT`) and
an `Algorithm` (`CAESAR`, `RSA` or `XOR`). Its text form is
`path|ALGORITHM|ACTION`:

```python
from filecrypt.task import Action, Algorithm, Task

task = Task("notes.txt", Action.ENCRYPT, Algorithm.RSA)
text = task.to_string()                     # "notes.txt|RSA|ENCRYPT"
assert Task.from_string(text) == task
```

`Task.from_string` raises `TaskFormatError` (a `ValueError`) when the text has
fewer than three fields. An algorithm name it does not know is read as `XOR`,
and any action other than `ENCRYPT` is read as `DECRYPT`.

`parse_action` and `parse_algorithm` accept user input in all lower or all
upper case, such as `encrypt` or `RSA`. They raise `ValueError` for anything
else.

`execute_caesar`, `execute_rsa` and `execute_xor` take a task string. They
read the named file and write the transformed bytes back over it, in place:

```python
from filecrypt.ciphers import execute_xor

execute_xor("notes.txt|XOR|ENCRYPT")
```

The file must already exist. If it cannot be opened, `OSError` is raised.
Files are overwritten, so make a copy first.

## Helpers for files

`filecrypt.fileio.open_read_write(path)` opens an existing file for binary
reading and writing. `filecrypt.fileio.read_env(path=".env")` returns the
whole text of the env file, or an empty string if the file cannot be opened.

## What this package does not do

The package has no command-line program. It does not walk a directory tree
or prompt for input. It also does not run tasks in separate worker processes
or through a queue. Each `execute_*` call handles one file, in the calling
process. To process many files, loop over them yourself.

## Running the tests

```
pip install ".[test]"
pytest
```