"""Composite circuits: series, parallel and feedback arrangements."""

from __future__ import annotations

from functools import reduce

from sinalsim.circuits import Circuit, SISOCircuit
from sinalsim.signal import Signal


def _add(first: Signal, second: Signal) -> Signal:
    return Signal(a + b for a, b in zip(first, second))


class Module(SISOCircuit):
    """A circuit built from an ordered list of single-input circuits."""

    def __init__(self) -> None:
        super().__init__()
        self._circuits: list[SISOCircuit] = []

    def add(self, circuit: SISOCircuit) -> None:
        """Append ``circuit`` to the module."""
        self._circuits.append(circuit)

    def circuits(self) -> list[SISOCircuit]:
        """Return the member circuits in order."""
        return list(self._circuits)

    def describe(self) -> str:
        """Describe the module and list its members by identifier."""
        lines = [f"Modulo com ID {self.id} e:"]
        # Members are listed by identifier only, even when they are modules.
        lines.extend(Circuit.describe(circuit) for circuit in self.circuits())
        lines.append("--")
        return "\n".join(lines)

    def _members(self) -> list[SISOCircuit]:
        members = self.circuits()
        if not members:
            raise ValueError("module has no circuits")
        return members


class SeriesModule(Module):
    """Feeds the signal through each member in turn."""

    def process(self, signal: Signal) -> Signal:
        return reduce(lambda current, circuit: circuit.process(current), self._members(), signal)


class ParallelModule(Module):
    """Feeds the same signal to every member and adds their outputs."""

    def process(self, signal: Signal) -> Signal:
        total = Signal.constant(0.0, len(signal))
        for circuit in self._members():
            total = _add(total, circuit.process(signal))
        return total


class FeedbackModule(Module):
    """Series chain in a loop with negative unit feedback of the previous output."""

    def __init__(self) -> None:
        super().__init__()
        self._series = SeriesModule()

    def add(self, circuit: SISOCircuit) -> None:
        self._series.add(circuit)

    def circuits(self) -> list[SISOCircuit]:
        return self._series.circuits()

    def process(self, signal: Signal) -> Signal:
        inverted = [0.0]
        output = self._series.process(Signal(signal[:1]))
        for index in range(1, len(signal)):
            inverted.append(-output[index - 1])
            output = self._series.process(_add(signal, Signal(inverted)))
        return output