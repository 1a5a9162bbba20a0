"""Signal-processing blocks: amplifiers, derivatives, integrators and adders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import accumulate, pairwise
from typing import ClassVar

from sinalsim.signal import Signal


class Circuit(ABC):
    """Base of every circuit; each instance gets the next sequential identifier."""

    _last_id: ClassVar[int] = 0

    def __init__(self) -> None:
        Circuit._last_id += 1
        self.id = Circuit._last_id

    @classmethod
    def last_id(cls) -> int:
        """Return the identifier given to the most recently created circuit."""
        return Circuit._last_id

    def describe(self) -> str:
        """Return a one-line description naming this circuit's identifier."""
        return f"Circuito com ID {self.id}"


class SISOCircuit(Circuit):
    """A circuit with one input signal and one output signal."""

    @abstractmethod
    def process(self, signal: Signal) -> Signal:
        """Return the output produced for ``signal``."""


class MISOCircuit(Circuit):
    """A circuit with two input signals and one output signal."""

    @abstractmethod
    def process(self, first: Signal, second: Signal) -> Signal:
        """Return the output produced for the two inputs."""


class Amplifier(SISOCircuit):
    """Multiplies every sample by a constant gain."""

    def __init__(self, gain: float) -> None:
        super().__init__()
        self.gain = gain

    def process(self, signal: Signal) -> Signal:
        return Signal(self.gain * value for value in signal)


class Derivative(SISOCircuit):
    """Discrete derivative: keeps the first sample, then takes differences."""

    def process(self, signal: Signal) -> Signal:
        return Signal([signal[0], *(current - previous for previous, current in pairwise(signal))])


class Integrator(SISOCircuit):
    """Discrete integral: the running sum of the samples."""

    def process(self, signal: Signal) -> Signal:
        return Signal(accumulate(signal))


class Adder(MISOCircuit):
    """Adds two signals sample by sample, truncated to the shorter one."""

    def process(self, first: Signal, second: Signal) -> Signal:
        return Signal(a + b for a, b in zip(first, second))


@dataclass
class Pilot:
    """Cruise control: amplifies the input by ``gain`` and integrates it."""

    gain: float

    def process(self, signal: Signal) -> Signal:
        return Integrator().process(Amplifier(self.gain).process(signal))


@dataclass
class GainFeedback:
    """First-order feedback loop: each output moves toward the input by ``gain``."""

    gain: float

    def process(self, signal: Signal) -> Signal:
        samples = iter(signal)
        previous = next(samples) * self.gain
        outputs = [previous]
        for value in samples:
            previous += self.gain * (value - previous)
            outputs.append(previous)
        return Signal(outputs)