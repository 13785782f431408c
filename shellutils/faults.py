"""
Shellutils faults and rendering.

Scope
- FaultCode: stable numeric identifiers for user-facing failures.
- ShellUtilsError: base exception carrying a message, a code, a short title and a
  hint; knows how to render itself through rich.
- NotInShellError: raised when a command-line context is required but missing.

Integration
- Library code raises; scripts that want a friendly report print the exception
  with a rich console (`console.print(error)`), or hand it to
  Console.report_exception().
- Host applications may customize rendering from __main__:
  • __styles__: palette overrides (see ShellUtilsError.__rich__).
  • __codes__: mapping FaultCode -> label (see FaultCode.normalize()).
  • __prog__: program name shown in headers.
"""
import os.path
import re
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - environment (131xx)
      • NOT_IN_SHELL
    """
    # --- environment errors (13xxx) ---
    NOT_IN_SHELL = 13101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _program():
    main = __import__("__main__")
    try:
        return getattr(main, "__prog__", os.path.basename(sys.argv[0])) or "python"
    except (AttributeError, IndexError):
        return "python"


class ShellUtilsError(Exception):
    """
    base class of every error raised by shellutils.

    attributes
    - message: the one-sentence description given at construction.
    - code: FaultCode of the failure.
    - options: read-only mapping of the remaining context (title, hint, colorful, ...).
    """
    code = None

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.code = options.pop("code", type(self).code)
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def text(fragment, style):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        title = self.options.get("title") or re.sub(r"(?<!^)(?=[A-Z])", " ", type(self).__name__).lower()
        code = self.code.normalize() if isinstance(self.code, FaultCode) else self.code

        header = Text.assemble(
            "[ ",
            text(_program(), "prog-name"),
            *((" — ", text(code, "code")) if code else ()),
            " | ",
            text(title.title(), "error-title"),
            " ]"
        )
        renders = [header, text(self.message, "error-message")]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
        return Group(*renders)


class NotInShellError(ShellUtilsError, EnvironmentError):
    """
    raised when a command-line execution context is required but not available
    (no argument vector, interactive or embedded interpreter).
    """
    code = FaultCode.NOT_IN_SHELL


__all__ = (
    "FaultCode",
    "ShellUtilsError",
    "NotInShellError",
)
