"""Saving and loading module structures as whitespace-separated text."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from os import PathLike
from typing import TextIO

from sinalsim.circuits import Amplifier, Derivative, Integrator
from sinalsim.modules import FeedbackModule, Module, ParallelModule, SeriesModule

END = "f"

_MODULE_TAGS: tuple[tuple[type[Module], str], ...] = (
    (ParallelModule, "P"),
    (SeriesModule, "S"),
    (FeedbackModule, "R"),
)

_MODULE_FACTORIES: dict[str, Callable[[], Module]] = {
    "S": SeriesModule,
    "P": ParallelModule,
    "R": FeedbackModule,
}


class FormatError(ValueError):
    """Raised when a saved module description is malformed."""


def _module_tag(module: Module) -> str:
    for cls, tag in _MODULE_TAGS:
        if isinstance(module, cls):
            return tag
    raise TypeError(f"cannot save module of type {type(module).__name__}")


def write_module(module: Module, stream: TextIO) -> None:
    """Write ``module`` and, recursively, all of its members to ``stream``."""
    stream.write(f"{_module_tag(module)}\n")
    for circuit in module.circuits():
        if isinstance(circuit, Integrator):
            stream.write("I\n")
        elif isinstance(circuit, Derivative):
            stream.write("D\n")
        elif isinstance(circuit, Amplifier):
            stream.write(f"A {circuit.gain:g}\n")
        elif isinstance(circuit, Module):
            write_module(circuit, stream)
        else:
            raise TypeError(f"cannot save circuit of type {type(circuit).__name__}")
    stream.write(f"{END}\n")


def _read_gain(tokens: Iterator[str]) -> float:
    token = next(tokens, None)
    if token is None:
        raise FormatError("amplifier without a gain")
    try:
        return float(token)
    except ValueError:
        raise FormatError(f"invalid gain {token!r}") from None


def _read_members(tokens: Iterator[str], module: Module) -> None:
    for token in tokens:
        if token == END:
            return
        if token in _MODULE_FACTORIES:
            child = _MODULE_FACTORIES[token]()
            _read_members(tokens, child)
            module.add(child)
        elif token == "A":
            module.add(Amplifier(_read_gain(tokens)))
        elif token == "I":
            module.add(Integrator())
        elif token == "D":
            module.add(Derivative())
        else:
            raise FormatError(f"invalid format: unexpected {token!r}")


def read_module(stream: TextIO) -> Module:
    """Read one module description from ``stream`` and build the module."""
    tokens = iter(stream.read().split())
    first = next(tokens, None)
    factory = _MODULE_FACTORIES.get(first) if first is not None else None
    if factory is None:
        raise FormatError("invalid format: the file must start with S, P or R")
    module = factory()
    _read_members(tokens, module)
    extra = next(tokens, None)
    if extra is not None:
        raise FormatError(f"incorrect file format: trailing {extra!r}")
    return module


class ModulePersistence:
    """Stores module structures in a text file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = path

    def save(self, module: Module) -> None:
        """Append the description of ``module`` to the file."""
        with open(self.path, "a", encoding="utf-8") as stream:
            write_module(module, stream)

    def load(self) -> Module:
        """Build the module described in the file."""
        with open(self.path, encoding="utf-8") as stream:
            return read_module(stream)