"""
    Interaction — the read and print halves of the editing loop.

    The session only talks to this interface, so the loop runs the same
    against a terminal or a scripted list of lines.
"""
from abc import ABC, abstractmethod
from typing import List

import click


class Interaction(ABC):

    @abstractmethod
    def read(self, prompt: str) -> str:
        """
        Return the next input line.

        Raises:
            EOFError:          At end of input.
            KeyboardInterrupt: When the user interrupts.
            OSError:           If the input stream fails.
        """
        ...

    @abstractmethod
    def add_history(self, line: str) -> None:
        ...

    @abstractmethod
    def log(self, message: str) -> None:
        """Show a message to the user."""
        ...

    def should_compile(self) -> bool:
        """Whether renders should invoke the external diagram program."""
        return True


class ConsoleInteraction(Interaction):
    """Reads from standard input, echoes to standard output."""

    def __init__(self, compile_diagrams: bool = True):
        self._compile = compile_diagrams
        self.history: List[str] = []

    def read(self, prompt: str) -> str:
        return input(prompt)

    def add_history(self, line: str) -> None:
        if line.strip():
            self.history.append(line)

    def log(self, message: str) -> None:
        click.echo(message)

    def should_compile(self) -> bool:
        return self._compile


class ScriptedInteraction(Interaction):
    """
    Feeds a fixed list of lines and records every message.
    Raises ``EOFError`` once the lines run out.
    With ``echo`` the lines and messages are also printed.
    """

    def __init__(self, lines: List[str], compile_diagrams: bool = False, echo: bool = False):
        self._lines = list(lines)
        self._compile = compile_diagrams
        self._echo = echo
        self.history: List[str] = []
        self.messages: List[str] = []

    def read(self, prompt: str) -> str:
        if not self._lines:
            raise EOFError
        line = self._lines.pop(0)
        if self._echo:
            click.echo(f"{prompt}{line}")
        return line

    def add_history(self, line: str) -> None:
        self.history.append(line)

    def log(self, message: str) -> None:
        self.messages.append(message)
        if self._echo:
            click.echo(message)

    def should_compile(self) -> bool:
        return self._compile
