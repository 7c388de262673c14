# /*
# Copyright 2026 The eksdemo Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# */

"""Declarative command flags bound to option attributes.

A flag names the object and attribute it writes to. Flag lists are turned
into typer option parameters for the command line, and parsed values are
written back with :meth:`Flags.apply`. Registration order is preserved
everywhere, so help output and shorthand collisions are deterministic.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import typer


class FlagValidationError(ValueError):
    """Raised when a flag value fails its validator."""


@dataclass
class CommandFlag:
    """Base flag definition.

    Attributes:
        name: Long flag name without dashes (e.g. ``vpc-cidr``).
        description: Help text.
        target: Object whose attribute the flag writes.
        attr: Attribute name on *target*.
        shorthand: Optional single-letter alias.
        validate: Optional callable that raises FlagValidationError on bad input.
        annotation: Python type typer converts the raw value to.
        show_default: Show the bound default in help output.
    """

    name: str
    description: str
    target: Any
    attr: str
    shorthand: str = ""
    validate: Callable[[Any], None] | None = None
    annotation: type = str
    show_default: bool = True

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")

    def declarations(self) -> list[str]:
        decls = [f"--{self.name}"]
        if self.shorthand:
            decls.append(f"-{self.shorthand}")
        return decls

    def get(self) -> Any:
        return getattr(self.target, self.attr)

    def set(self, value: Any) -> None:
        setattr(self.target, self.attr, value)

    def check(self, value: Any) -> None:
        """Run the flag's validator, if any.

        Args:
            value: Candidate value parsed from the command line.

        Raises:
            FlagValidationError: If the value is rejected.
        """
        if self.validate is not None:
            self.validate(value)

    def help_text(self) -> str:
        return self.description

    def parameter(self) -> inspect.Parameter:
        """Build a keyword-only typer option parameter defaulting to the bound value."""
        option = typer.Option(
            self.get(),
            *self.declarations(),
            help=self.help_text(),
            show_default=self.show_default,
            callback=self._on_parse,
        )
        return inspect.Parameter(self.dest, inspect.Parameter.KEYWORD_ONLY, default=option, annotation=self.annotation)

    def _on_parse(self, ctx: typer.Context, param: typer.CallbackParam, value: Any) -> Any:
        try:
            self.check(value)
        except FlagValidationError as err:
            raise typer.BadParameter(str(err), ctx=ctx, param=param) from err
        return value


@dataclass
class BoolFlag(CommandFlag):
    annotation: type = bool
    show_default: bool = False


@dataclass
class StringFlag(CommandFlag):
    choices: tuple[str, ...] = ()

    def help_text(self) -> str:
        if self.choices:
            return f"{self.description} (one of: {', '.join(self.choices)})"
        return self.description

    def check(self, value: Any) -> None:
        if self.choices and value not in self.choices:
            raise FlagValidationError(
                f"invalid value {value!r} for --{self.name}, must be one of: {', '.join(self.choices)}"
            )
        super().check(value)


@dataclass
class IntFlag(CommandFlag):
    minimum: int | None = None
    annotation: type = int

    def check(self, value: Any) -> None:
        if self.minimum is not None and value < self.minimum:
            raise FlagValidationError(f"--{self.name} must be at least {self.minimum}, got {value}")
        super().check(value)


class Flags(list):
    """Ordered list of CommandFlag definitions."""

    def check_unique(self) -> None:
        """Ensure no two flags share a long name or shorthand.

        Raises:
            ValueError: On the first collision, naming the flag registered first.
        """
        seen: dict[str, str] = {}
        for flag in self:
            for decl in flag.declarations():
                if decl in seen:
                    raise ValueError(f"flag {decl} of --{flag.name} collides with --{seen[decl]}")
                seen[decl] = flag.name

    def parameters(self) -> list[inspect.Parameter]:
        return [flag.parameter() for flag in self]

    def apply(self, values: Mapping[str, Any]) -> None:
        """Validate then assign parsed values to their bound attributes.

        Every present value is checked before any attribute is written, so a
        rejected value leaves the bound options untouched.

        Args:
            values: Parsed values keyed by flag ``dest``; missing keys are ignored.

        Raises:
            FlagValidationError: If any value fails validation.
        """
        present = [(flag, values[flag.dest]) for flag in self if flag.dest in values]
        for flag, value in present:
            flag.check(value)
        for flag, value in present:
            flag.set(value)
