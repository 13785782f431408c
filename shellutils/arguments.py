r"""
Shellutils argument tokenizer and queries.

Overview
- tokenize(tokens): one left-to-right scan that classifies raw command-line tokens into
  options (name -> value or None) and positional parameters.
- Arguments: captures sys.argv (or explicit tokens) once and answers pure queries
  over the scan results.

Token grammar (names are [A-Za-z0-9_], matched case-insensitively, case preserved)
- long option:   --name            → options["name"] = None
                 --name=value      → options["name"] = "value"
- short option:  -n [value]        → options["n"] = "value" when the next token is not
                                     flag-shaped ("-" followed by anything), else None
- short cluster: -abc              → options["a"] = options["b"] = options["c"] = None
- anything else is a positional parameter.

Repeated names overwrite earlier values (last write wins). Nothing here raises on
odd-looking input: tokens that fit no option shape are positional parameters.

Example
    >>> tokens = tokenize(["build", "-o", "out", "--jobs=4", "-vq"])
    >>> dict(tokens.options)
    {'o': 'out', 'jobs': '4', 'v': None, 'q': None}
    >>> tokens.parameters
    ('build',)
"""
import re
import shlex
import sys
from collections.abc import Iterable
from types import MappingProxyType
from typing import NamedTuple

from .faults import NotInShellError
from .utils import Unset, Missing

# "." never matches a line break, and "$" also accepts one trailing line break
_LONG = re.compile(r"--(?P<name>[a-z0-9_]+)(=(?P<value>.+))?$", re.IGNORECASE | re.ASCII)
_SHORT = re.compile(r"-(?P<name>[a-z0-9_])$", re.IGNORECASE | re.ASCII)
_CLUSTER = re.compile(r"-(?P<name>[a-z0-9_]+)$", re.IGNORECASE | re.ASCII)
_FLAGLIKE = re.compile(r"-.")


class Tokens(NamedTuple):
    """
    result of tokenize(): read-only options mapping and positional parameters tuple.
    """
    options: MappingProxyType
    parameters: tuple


def _sanitized(tokens):
    """
    normalize a prompt into a tuple of tokens.

    - str: shell-like string, split with shlex.split; when its quotes do not balance,
      it is split on whitespace instead (quotes kept as typed).
    - Iterable[str]: used verbatim; non-string items are rejected.
    """
    if isinstance(tokens, str):
        try:
            return tuple(shlex.split(tokens))
        except ValueError:
            return tuple(tokens.split())
    if not isinstance(tokens, Iterable):
        raise TypeError("tokenize() argument must be a string or an iterable of strings")
    tokens = tuple(tokens)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError("tokenize() argument must be a string or an iterable of strings")
    return tokens


def tokenize(tokens, /):
    """
    classify raw tokens (program name excluded) into options and positional parameters.

    parameters
    - tokens: str | Iterable[str]
      the invocation tokens; a single string is split shell-style.

    returns
    - Tokens(options, parameters)
      • options: MappingProxyType[str, str | None]; None marks a flag given without value.
      • parameters: tuple[str, ...] in encountered order.

    notes
    - a short option consumes the following token as its value unless that token is
      flag-shaped ('-' plus at least one character). a bare '-' is not flag-shaped.
    - negative numbers such as '-5' are flag-shaped, so they are never consumed as
      values (and on their own they are short options named '5').
    """
    tokens = _sanitized(tokens)

    options = {}
    parameters = []

    skip = False
    for index, token in enumerate(tokens):
        if skip:
            # already consumed as the previous short option's value
            skip = False
            continue

        if match := _LONG.match(token):
            options[match["name"]] = match["value"]
        elif match := _SHORT.match(token):
            if index + 1 < len(tokens) and not _FLAGLIKE.match(tokens[index + 1]):
                options[match["name"]] = tokens[index + 1]
                skip = True
            else:
                options[match["name"]] = None
        elif match := _CLUSTER.match(token):
            for name in match["name"]:
                options[name] = None
        else:
            parameters.append(token)

    return Tokens(MappingProxyType(options), tuple(parameters))


def _alternatives(names, caller):
    # has_option(["v", "verbose"]) is the same as has_option("v", "verbose")
    if len(names) == 1 and not isinstance(names[0], str) and isinstance(names[0], Iterable):
        names = tuple(names[0])
    if not names:
        raise TypeError("%s() takes at least one option name" % caller)
    for name in names:
        if not isinstance(name, str):
            raise TypeError("%s() option names must be strings" % caller)
    return names


class Arguments:
    """
    parsed command-line arguments of the running script.

    construction
    - Arguments(): capture sys.argv[1:] of the current process. raises NotInShellError
      when there is no command-line context (no sys.argv, or an empty program name as
      in interactive and embedded interpreters).
    - Arguments(tokens): use explicit tokens (str or Iterable[str]) instead; no context
      check is made.

    the raw input, options and parameters are computed once and never change.
    """
    __slots__ = ("_raw", "_program", "_options", "_parameters")

    def __init__(self, tokens=Unset, /):
        if tokens is Unset:
            argv = getattr(sys, "argv", None)
            if not argv or not argv[0]:
                raise NotInShellError(
                    "%s can only be used from a command-line script" % type(self).__name__,
                    title="not in a shell",
                    hint="run the script from a terminal (python script.py ...) or pass the tokens explicitly"
                )
            self._program = argv[0]
            self._raw = _sanitized(argv[1:])
        else:
            self._program = None
            self._raw = _sanitized(tokens)
        self._options, self._parameters = tokenize(self._raw)

    @property
    def raw(self):
        """the captured tokens, program name excluded."""
        return self._raw

    @property
    def program(self):
        """the program name from sys.argv[0], or None for explicit tokens."""
        return self._program

    @property
    def options(self):
        """read-only mapping of option names to their value (None for flags)."""
        return self._options

    @property
    def parameters(self):
        """positional parameters, in order."""
        return self._parameters

    # --- parameters ---

    def count_parameters(self):
        return len(self._parameters)

    def has_parameters(self):
        """whether at least one positional parameter was given."""
        return bool(self._parameters)

    def parameter(self, index, /):
        """
        return the positional parameter at a zero-based index, or Missing.

        negative indexes are not wrapped around; they are simply not found.
        """
        if not isinstance(index, int):
            raise TypeError("parameter() argument must be an integer")
        if 0 <= index < len(self._parameters):
            return self._parameters[index]
        return Missing

    def position(self, value, /):
        """return the index of the first parameter equal to value, or Missing."""
        try:
            return self._parameters.index(value)
        except ValueError:
            return Missing

    def has_parameter(self, value, /):
        return value in self._parameters

    # --- options ---

    def count_options(self):
        return len(self._options)

    def has_options(self):
        """whether at least one option was given."""
        return bool(self._options)

    def has_option(self, *names):
        """
        whether any of the given option names is present.

        accepts either several names (has_option("v", "verbose")) or a single
        iterable of alternatives (has_option(["v", "verbose"])).
        """
        return any(name in self._options for name in _alternatives(names, "has_option"))

    def value(self, *names):
        """
        return the value of the first present option among names.

        returns
        - str: the option was given a value.
        - None: the option was given without value.
        - Missing: none of the names is present.
        """
        for name in _alternatives(names, "value"):
            if name in self._options:
                return self._options[name]
        return Missing

    # --- protocols ---

    def __contains__(self, name):
        return name in self._options

    def __len__(self):
        return len(self._options)

    def __iter__(self):
        return iter(self._options)

    def __repr__(self):
        return "%s(options=%r, parameters=%r)" % (type(self).__name__, dict(self._options), list(self._parameters))

    def __rich_repr__(self):
        yield "options", dict(self._options)
        yield "parameters", list(self._parameters)
        if self._program is not None:
            yield "program", self._program


__all__ = (
    "Tokens",
    "tokenize",
    "Arguments",
)
