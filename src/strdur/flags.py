"""argparse integration: expose a Settable value as a command-line flag."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from strdur._value import StringDuration
from strdur.capability import Settable


class SetValueAction(argparse.Action):
    """Assign the option argument through ``target.set()``.

    The target object itself is the option's default, so ``%(default)s``
    in help text renders its current value.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        *,
        target: Settable,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("default", target)
        kwargs.setdefault("metavar", "DURATION")
        super().__init__(option_strings, dest, nargs=None, **kwargs)
        self.target = target

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        try:
            self.target.set(values)
        except ValueError as exc:
            raise argparse.ArgumentError(self, str(exc)) from exc
        setattr(namespace, self.dest, self.target)


def add_duration_argument(
    parser: argparse.ArgumentParser,
    *names: str,
    value: Settable | None = None,
    help: str | None = None,
    **kwargs: Any,
) -> Settable:
    """Register a duration option on ``parser``.

    Args:
        parser: The parser (or argument group) to register on.
        *names: Option strings, e.g. ``"--timeout"``.
        value: The value the option assigns into. A new zero
            StringDuration is created when omitted.
        help: Help text; may reference ``%(default)s``.
        **kwargs: Passed through to ``add_argument``.

    Returns:
        The bound value.
    """
    if value is None:
        value = StringDuration()
    parser.add_argument(*names, action=SetValueAction, target=value, help=help, **kwargs)
    return value


def flag_var_type_func(
    parser: argparse.ArgumentParser, var: Any, name: str, usage: str
) -> None:
    """Register ``var`` as ``--name``; for generators that map config fields to flags."""
    if not isinstance(var, StringDuration):
        raise TypeError(f"expected StringDuration, got {type(var).__name__}")
    add_duration_argument(parser, f"--{name}", value=var, help=usage)
