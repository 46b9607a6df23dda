"""Tasks: a file, an algorithm and an action, with their text form."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO

from filecrypt.fileio import open_read_write

SEPARATOR = "|"


class Action(enum.Enum):
    ENCRYPT = "ENCRYPT"
    DECRYPT = "DECRYPT"


class Algorithm(enum.Enum):
    CAESAR = "CAESAR"
    RSA = "RSA"
    XOR = "XOR"


class TaskFormatError(ValueError):
    """Raised when a task string cannot be parsed."""


def parse_action(text: str) -> Action:
    """Parse ``encrypt``/``decrypt`` in all lower or all upper case."""
    for action in Action:
        if text in (action.value, action.value.lower()):
            return action
    raise ValueError("Invalid action. Use 'encrypt' or 'decrypt'.")


def parse_algorithm(text: str) -> Algorithm:
    """Parse ``caesar``/``rsa``/``xor`` in all lower or all upper case."""
    for algorithm in Algorithm:
        if text in (algorithm.value, algorithm.value.lower()):
            return algorithm
    raise ValueError("Invalid algorithm. Use 'caesar', 'rsa', or 'xor'.")


@dataclass(frozen=True)
class Task:
    """One file to transform in place."""

    file_path: str
    action: Action
    algorithm: Algorithm

    def to_string(self) -> str:
        """Serialise as ``filePath|ALGORITHM|ACTION``."""
        return SEPARATOR.join((self.file_path, self.algorithm.value, self.action.value))

    @classmethod
    def from_string(cls, task_data: str) -> "Task":
        """Parse the text form; unknown names fall back to XOR and DECRYPT."""
        parts = task_data.split(SEPARATOR, 2)
        if len(parts) < 3 or not parts[2]:
            raise TaskFormatError("Invalid task data format")
        file_path, algo_str, rest = parts
        action_str = rest.split("\n", 1)[0]
        action = Action.ENCRYPT if action_str == Action.ENCRYPT.value else Action.DECRYPT
        if algo_str == Algorithm.CAESAR.value:
            algorithm = Algorithm.CAESAR
        elif algo_str == Algorithm.RSA.value:
            algorithm = Algorithm.RSA
        else:
            algorithm = Algorithm.XOR
        return cls(file_path, action, algorithm)

    def open(self) -> BinaryIO:
        """Open the task's file for binary reading and writing."""
        return open_read_write(self.file_path)