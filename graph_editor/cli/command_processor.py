"""
    CommandParser — turns a raw input line into a ``Command`` object.

    Design Pattern: Interpreter
    ───────────────────────────
    The grammar is thin: a verb (long or one-letter form),
    then ids separated by whitespace, and for labels the rest of the line.
    The parser never raises; anything it can't read becomes a
    ``ParseErrorCommand`` carrying the original line.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from editor_api.types import Identifier, Label

from .commands import (
    Command,
    InsertNodeCommand,
    DeleteNodeCommand,
    LinkEdgeCommand,
    RenameNodeCommand,
    RenameNodeUnlabelledCommand,
    UnlinkEdgeCommand,
    SearchCommand,
    PrintDotCommand,
    PrintJsonCommand,
    HelpCommand,
    SaveCommand,
    ShowCommand,
    ExitCommand,
    ParseErrorCommand,
)

logger = logging.getLogger(__name__)

# verb aliases -> canonical verb
_VERBS: Dict[str, str] = {
    "i": "insert", "insert": "insert",
    "d": "delete", "delete": "delete",
    "l": "link", "link": "link",
    "u": "unlink", "unlink": "unlink",
    "r": "rename", "rename": "rename",
    "s": "search", "search": "search",
    "dot": "dot",
    "json": "json",
    "h": "help", "help": "help", "?": "help",
    "save": "save",
    "show": "show",
    "q": "exit", "quit": "exit", "exit": "exit",
}

# verbs that take no arguments
_BARE_COMMANDS: Dict[str, Callable[[], Command]] = {
    "dot": PrintDotCommand,
    "json": PrintJsonCommand,
    "help": HelpCommand,
    "save": SaveCommand,
    "show": ShowCommand,
    "exit": ExitCommand,
}


class CommandParser:
    """
    Usage:
        parser = CommandParser()
        command = parser.parse("l n0 n1")     # LinkEdgeCommand(n0, n1)
    """

    def parse(self, line: str) -> Command:
        text = line.strip()
        if not text:
            return ParseErrorCommand(line)

        parts = text.split(None, 1)
        verb = _VERBS.get(parts[0].lower())
        rest = parts[1].strip() if len(parts) > 1 else ""

        if verb is None:
            logger.debug("Unknown verb in %r", line)
            return ParseErrorCommand(line)

        command = self._parse_verb(verb, rest)
        return command if command is not None else ParseErrorCommand(line)

    # ── Verb parsers ─────────────────────────────────────────────

    def _parse_verb(self, verb: str, rest: str) -> Optional[Command]:
        if verb in _BARE_COMMANDS:
            return _BARE_COMMANDS[verb]() if not rest else None

        if verb == "insert":
            label = self._strip_quotes(rest)
            return InsertNodeCommand(Label(label)) if label else None

        if verb == "search":
            return SearchCommand(self._strip_quotes(rest))

        if verb == "rename":
            args = rest.split(None, 1)
            if len(args) == 1:
                return RenameNodeUnlabelledCommand(Identifier(args[0]))
            if len(args) == 2:
                label = self._strip_quotes(args[1].strip())
                if label:
                    return RenameNodeCommand(Identifier(args[0]), Label(label))
            return None

        ids = self._ids(rest)
        if verb == "delete" and len(ids) == 1:
            return DeleteNodeCommand(ids[0])
        if verb == "unlink" and len(ids) == 1:
            return UnlinkEdgeCommand(ids[0])
        if verb == "link" and len(ids) == 2:
            return LinkEdgeCommand(ids[0], ids[1])
        return None

    # ── Token helpers ────────────────────────────────────────────

    @staticmethod
    def _ids(rest: str) -> List[Identifier]:
        return [Identifier(token) for token in rest.split()]

    @staticmethod
    def _strip_quotes(raw: str) -> str:
        """Strip one pair of surrounding quotes if present."""
        if len(raw) >= 2 and raw[0] in ("'", '"') and raw[-1] == raw[0]:
            raw = raw[1:-1]
        return raw.strip()
