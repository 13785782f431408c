"""
Shellutils console output helper.

Overview
- ConsoleConfig: the per-console switches (quiet, yes, colorful).
- Console: prints styled text, status flags, rules, prompts and error/exception
  reports through a rich console.

Modes
- quiet: every output method is a no-op, prompts still show their question.
- yes: confirm() answers by itself (the default when one is given, else yes)
  without prompting.
- colorful: when false, no style is applied at all.

Each Console owns its config, so several consoles (one per test, one per
sub-tool) never interfere with each other.

Styles
- Methods take a style name from the palette below, or any rich style string.
- The host application can override palette entries with a __styles__ mapping
  in __main__, e.g. __styles__ = {"done": "bold green"}.
"""
import textwrap
import traceback
import warnings

from rich.console import Console as RichConsole
from rich.text import Text

from .faults import FaultCode
from .utils import Unset, coalesce

COLS = 80
"""width used for rules and for wrapping report messages."""

_PALETTE = {
    # status flags
    "done": "green",
    "fail": "red",

    # reports
    "error-rule": "bold red",
    "error-title": "bold red",
    "error": "red",
    "trace-title": "underline red",
    "trace": "red",

    # prompts
    "question": "",
}


class ConsoleConfig:
    """
    switches of a Console.

    - quiet: suppress all output except prompt questions.
    - yes: answer yes-or-default to every confirm() without prompting.
    - colorful: apply styles (when false, output is plain text).
    """
    __slots__ = ("quiet", "yes", "colorful")

    def __init__(self, *, quiet=False, yes=False, colorful=True):
        self.quiet = bool(quiet)
        self.yes = bool(yes)
        self.colorful = bool(colorful)

    def __repr__(self):
        return "%s(quiet=%r, yes=%r, colorful=%r)" % (type(self).__name__, self.quiet, self.yes, self.colorful)

    def __rich_repr__(self):
        yield "quiet", self.quiet
        yield "yes", self.yes
        yield "colorful", self.colorful


def _describe(exception):
    code = getattr(exception, "code", None)
    if isinstance(code, FaultCode):
        code = code.normalize()
    return "[%s]%s" % (type(exception).__qualname__, " (code: %s)" % code if code else "")


def _previous(exception):
    if exception.__cause__ is not None:
        return exception.__cause__
    if exception.__suppress_context__:
        return None
    return exception.__context__


def _wrap(message, width):
    # existing line breaks are kept, long words are never cut
    for paragraph in message.splitlines() or [""]:
        yield from textwrap.wrap(paragraph, width, break_long_words=False, break_on_hyphens=False) or [""]


class Console:
    """
    console output helper.

    parameters
    - config: ConsoleConfig | Unset
      switches of this console; a fresh ConsoleConfig() when omitted.
    - file: writable text stream | Unset
      where output goes (stdout when omitted).
    - stdin: readable text stream | Unset
      where answers are read from (the terminal via input() when omitted).
    """

    def __init__(self, config=Unset, /, *, file=Unset, stdin=Unset):
        if config is not Unset and not isinstance(config, ConsoleConfig):
            raise TypeError("Console() argument must be a console config")
        self.config = ConsoleConfig() if config is Unset else config
        self._stdin = coalesce(stdin)
        self._console = RichConsole(
            file=coalesce(file),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True
        )

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.config)

    def _styler(self, style):
        if not style or not self.config.colorful:
            return ""
        styles = _PALETTE | getattr(__import__("__main__"), "__styles__", {})
        return styles.get(style, style)

    # --- modes ---

    @property
    def quiet(self):
        return self.config.quiet

    def enable_quiet(self):
        """block every output except prompt questions."""
        self.config.quiet = True

    def disable_quiet(self):
        self.config.quiet = False

    @property
    def yes(self):
        return self.config.yes

    def enable_yes(self):
        """answer every confirm() without prompting."""
        self.config.yes = True

    def disable_yes(self):
        self.config.yes = False

    # --- output ---

    def send(self, message, /, *, style="", newline=False):
        """
        write a message (no trailing newline unless newline=True).

        the message is printed verbatim: rich markup and emoji codes are not interpreted.
        """
        if self.config.quiet:
            return
        self._console.print(Text(str(message), self._styler(style)), end="\n" if newline else "")

    def show(self, renderable, /):
        """print any rich renderable (e.g. a ShellUtilsError) followed by a newline."""
        if self.config.quiet:
            return
        self._console.print(renderable)

    def br(self, count=1, /):
        """write count line breaks (at least one)."""
        self.send("\n" * max(count, 1))

    def line(self, message, /, *, style=""):
        self.send(message, style=style, newline=True)

    def hr(self, *, style=""):
        """write a rule of dashes across COLS columns."""
        self.line("-" * COLS, style=style)

    def done(self, message="done", /):
        """close a processing line with a green ' [done]'."""
        self.line(" [%s]" % message, style="done")

    def fail(self, message="error", /):
        """close a processing line with a red ' [error]'."""
        self.line(" [%s]" % message, style="fail")

    # --- prompts ---

    def _input(self, prompt):
        try:
            answer = self._console.input(Text(prompt, self._styler("question")), stream=self._stdin)
        except EOFError:
            # closed or exhausted stdin reads as an empty answer, like a stream at its end
            return ""
        return answer.strip()

    def ask(self, question, /, default=None):
        """
        ask a question and return the answer.

        an empty answer returns the stripped default (None when there is none).
        """
        prompt = question.strip()
        if default:
            prompt += " [%s]" % default.strip()
        if answer := self._input(prompt + " "):
            return answer
        return default.strip() if default is not None else None

    def confirm(self, question, /, default=None):
        """
        ask a yes/no question.

        returns
        - True for 'y' or 'yes' (any case), False for any other answer.
        - default (False when None) for an empty answer.
        - in yes mode, default (True when None) without prompting.
        """
        if self.config.yes:
            return True if default is None else bool(default)
        hint = "" if default is None else " [%s]" % ("y" if default else "n")
        if not (answer := self._input("%s (y/n)%s " % (question.strip(), hint))):
            return bool(default)
        return answer.lower() in ("y", "yes")

    def prompt(self, question, /):
        """deprecated alias of ask()."""
        warnings.warn("Console.prompt() is deprecated, use Console.ask() instead", DeprecationWarning, stacklevel=2)
        return self.ask(question)

    # --- reports ---

    def _message(self, message, style):
        for line in _wrap(str(message), COLS - 3):
            self.line("   " + line, style=style)

    def _trace(self, exception):
        self.br()
        self.send("   ")
        self.line("Trace:", style="trace-title")
        for frame in traceback.format_tb(exception.__traceback__):
            for line in frame.rstrip("\n").splitlines():
                for wrapped in _wrap(line, COLS - 3):
                    self.line("   " + wrapped, style="trace")

    def report_error(self, message, /):
        """report an error between two rules; the message can span several lines."""
        self.hr(style="error-rule")
        self.line("—› ERROR:", style="error-title")
        self._message(message, "error")
        self.hr(style="error-rule")

    def report_exception(self, exception, /):
        """
        report an exception with its traceback, followed by every exception it was
        chained from (explicit cause first, otherwise the implicit context).
        """
        if not isinstance(exception, BaseException):
            raise TypeError("report_exception() argument must be an exception")

        self.hr(style="error-rule")
        self.line("—› EXCEPTION %s:" % _describe(exception), style="error-title")
        self._message(exception, "error")
        self._trace(exception)

        seen = {id(exception)}
        index = 0
        previous = _previous(exception)
        while previous is not None and id(previous) not in seen:
            seen.add(id(previous))
            self.br(2)
            self.line("—› PREV EXCEPTION #%d %s:" % (index, _describe(previous)), style="error-title")
            self._message(previous, "error")
            self._trace(previous)
            index += 1
            previous = _previous(previous)

        self.hr(style="error-rule")


__all__ = (
    "COLS",
    "ConsoleConfig",
    "Console",
)
