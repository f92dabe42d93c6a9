"""
Shell plugin commands for plistbridge.

This module defines the ``from plist`` and ``to plist`` commands: their
signatures, held in a registry, and the plugin that runs them. Errors from the
codec and the transcoder are reported to the shell as ``LabeledError``.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .codec import parse_plist, write_plist
from .conversion import decode, encode
from .errors import ConversionError, LabeledError, PlistFormatError
from .models import BaseValue, BinaryValue, StringValue

FROM_PLIST = "from plist"
TO_PLIST = "to plist"


@dataclass
class CommandSwitch:
    """A boolean flag accepted by a command."""
    name: str
    description: str
    short: Optional[str] = None


@dataclass
class CommandExample:
    """A usage example shown in the command's help."""
    example: str
    description: str


@dataclass
class CommandSignature:
    """
    Signature of a plugin command as registered with the shell.
    """
    name: str
    usage: str
    input_output_types: List[Tuple[str, str]] = field(default_factory=list)
    switches: List[CommandSwitch] = field(default_factory=list)
    examples: List[CommandExample] = field(default_factory=list)
    category: str = "formats"


class CommandRegistry:
    """
    Registry of the commands provided by the plugin.
    """

    def __init__(self):
        """Initialize the registry with the plist commands."""
        self._commands: Dict[str, CommandSignature] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        """Register the ``from plist`` and ``to plist`` commands."""

        self.register_command(CommandSignature(
            name=FROM_PLIST,
            usage="Parse text as an Apple plist document",
            input_output_types=[("string", "any"), ("binary", "any")],
            examples=[CommandExample(
                example="cat file.plist | from plist",
                description="Convert a plist file to a table",
            )],
        ))

        self.register_command(CommandSignature(
            name=TO_PLIST,
            usage="Convert Nu values into plist",
            input_output_types=[("any", "string"), ("any", "binary")],
            switches=[CommandSwitch(
                name="binary",
                description="Output plist in binary format",
                short="b",
            )],
            examples=[CommandExample(
                example="{ a: 3 } | to plist",
                description="Convert a table into a plist file",
            )],
        ))

    def register_command(self, signature: CommandSignature) -> None:
        """
        Register a command signature.

        Args:
            signature: The signature to register
        """
        self._commands[signature.name] = signature

    def get_command(self, name: str) -> Optional[CommandSignature]:
        """
        Get a command signature by name.

        Returns:
            The signature, or None if not found
        """
        return self._commands.get(name)

    def list_commands(self) -> List[str]:
        """Get a list of all registered command names."""
        return list(self._commands.keys())


# Global command registry instance
command_registry = CommandRegistry()


class PlistPlugin:
    """
    Runs the plist commands on values handed over by the shell.
    """

    def __init__(self, registry: Optional[CommandRegistry] = None):
        self.registry = registry or command_registry

    def signature(self) -> List[CommandSignature]:
        """Return the signatures of every command this plugin provides."""
        return [self.registry.get_command(name) for name in self.registry.list_commands()]

    def run(self, name: str, input: BaseValue, binary: bool = False) -> BaseValue:
        """
        Run a plugin command.

        Args:
            name: Command name, ``from plist`` or ``to plist``
            input: Value piped into the command
            binary: The ``--binary`` switch of ``to plist``

        Returns:
            The command's output value

        Raises:
            LabeledError: If the command is unknown or the conversion fails
        """
        logging.debug(f"Running plugin command: {name}")

        if name == FROM_PLIST:
            return self._from_plist(input)
        if name == TO_PLIST:
            return self._to_plist(input, binary)

        raise LabeledError(f"Unknown command: {name}")

    def _from_plist(self, input: BaseValue) -> BaseValue:
        if isinstance(input, (StringValue, BinaryValue)):
            data = input.val
        else:
            raise LabeledError(f"Invalid input, must be string not: {input!r}")

        try:
            return decode(parse_plist(data))
        except (PlistFormatError, ConversionError) as e:
            logging.error(f"from plist failed: {e}")
            raise LabeledError(str(e)) from e
        except RecursionError as e:
            logging.error("from plist failed: value nests too deeply or refers to itself")
            raise LabeledError("Property list nests too deeply or refers to itself") from e

    def _to_plist(self, input: BaseValue, binary: bool) -> BaseValue:
        try:
            out = write_plist(encode(input), binary=binary)
        except (PlistFormatError, ConversionError) as e:
            logging.error(f"to plist failed: {e}")
            raise LabeledError(str(e)) from e
        except RecursionError as e:
            logging.error("to plist failed: value nests too deeply")
            raise LabeledError("Value nests too deeply to convert") from e

        if binary:
            return BinaryValue(val=out)

        try:
            return StringValue(val=out.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise LabeledError(str(e)) from e
