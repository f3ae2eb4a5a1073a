"""
CLI package — textual commands for editing the graph.

Design Patterns
───────────────
• Command     – each operation is a ``Command`` object with ``execute()``.
• Interpreter – ``CommandParser`` turns a line of text into a command.
"""
from .command_processor import CommandParser
from .commands import (
    Command,
    CommandResult,
    GraphCommand,
    SessionCommand,
    InsertNodeCommand,
    DeleteNodeCommand,
    LinkEdgeCommand,
    RenameNodeCommand,
    UnlinkEdgeCommand,
    SearchCommand,
    PrintDotCommand,
    PrintJsonCommand,
    HelpCommand,
    SaveCommand,
    ShowCommand,
    ExitCommand,
    RenameNodeUnlabelledCommand,
    ParseErrorCommand,
)

__all__ = [
    'CommandParser',
    'Command',
    'CommandResult',
    'GraphCommand',
    'SessionCommand',
    'InsertNodeCommand',
    'DeleteNodeCommand',
    'LinkEdgeCommand',
    'RenameNodeCommand',
    'UnlinkEdgeCommand',
    'SearchCommand',
    'PrintDotCommand',
    'PrintJsonCommand',
    'HelpCommand',
    'SaveCommand',
    'ShowCommand',
    'ExitCommand',
    'RenameNodeUnlabelledCommand',
    'ParseErrorCommand',
]
