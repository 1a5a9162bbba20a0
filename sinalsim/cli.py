"""Interactive menus for building circuits, running them and plotting the result."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterator
from typing import TextIO, TypeVar

from sinalsim.chart import Chart
from sinalsim.circuits import Adder, Amplifier, Derivative, GainFeedback, Integrator
from sinalsim.modules import FeedbackModule, Module, ParallelModule, SeriesModule
from sinalsim.persistence import FormatError, ModulePersistence
from sinalsim.signal import Signal

SIGNAL_LENGTH = 60
HEADER = "        Simulador de sinais    "

_T = TypeVar("_T")


def make_input(choice: int, parameter: float = 0.0, length: int = SIGNAL_LENGTH) -> Signal:
    """Build an input signal: 2 is a constant, 3 a ramp, anything else 5 + 3*cos(n*pi/8)."""
    if choice == 2:
        return Signal.constant(parameter, length)
    if choice == 3:
        return Signal(n * parameter for n in range(length))
    return Signal(5 + 3 * math.cos(n * math.pi / 8) for n in range(length))


class _Console:
    """Whitespace-separated token input with prompts, in the style of a terminal menu."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = self._split(stdin)
        self.out = stdout

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def say(self, *lines: str) -> None:
        for line in lines:
            self.out.write(line + "\n")

    def _ask(self, prompt: str, convert: Callable[[str], _T], default: _T) -> _T:
        self.out.write(prompt)
        self.out.flush()
        token = next(self._tokens, None)
        self.out.write("\n")
        if token is None:
            return default
        try:
            return convert(token)
        except ValueError:
            return default

    def ask_int(self, prompt: str = "Escolha: ") -> int:
        return self._ask(prompt, int, 0)

    def ask_float(self, prompt: str) -> float:
        return self._ask(prompt, float, 0.0)

    def ask_word(self, prompt: str) -> str:
        return self._ask(prompt, str, "")


def _ask_signal(console: _Console) -> Signal:
    console.say(
        "Qual sinal voce gostaria de utilizar como entrada da sua simulacao?",
        "1) 5 + 3*cos(n*pi/8)",
        "2) constante",
        "3) rampa",
    )
    choice = console.ask_int()
    parameter = 0.0
    if choice == 2:
        console.say("Qual o valor dessa constante?")
        parameter = console.ask_float("C = ")
    elif choice == 3:
        console.say("Qual a inclinacao dessa rampa?")
        parameter = console.ask_float("a = ")
    return make_input(choice, parameter)


def _parse_args(argv: list[str] | None, description: str) -> None:
    argparse.ArgumentParser(description=description).parse_args(argv)


def _load_module(console: _Console) -> Module | None:
    console.say("Qual o nome do arquivo a ser lido?")
    path = console.ask_word("Nome: ")
    try:
        return ModulePersistence(path).load()
    except FileNotFoundError:
        console.say("Arquivo nao encontrado")
    except FormatError as error:
        console.say(str(error))
    except OSError as error:
        console.say(str(error))
    return None


def _build_module(console: _Console) -> Module:
    console.say(
        "Qual estrutura de operacoes voce deseja ter como base?",
        "1) Operacoes em serie nao realimentadas",
        "2) Operacoes em paralelo nao realimentadas",
        "3) Operacoes em serie realimentadas",
    )
    structures = {1: SeriesModule, 2: ParallelModule, 3: FeedbackModule}
    module = structures.get(console.ask_int(), SeriesModule)()
    while True:
        console.say(
            "Qual operacao voce gostaria de fazer?",
            "1) Amplificar",
            "2) Derivar",
            "3) Integrar",
        )
        operation = console.ask_int()
        if operation == 1:
            console.say("Qual o ganho dessa amplificacao:")
            module.add(Amplifier(console.ask_float("g = ")))
        elif operation == 2:
            module.add(Derivative())
        else:
            module.add(Integrator())
        console.say(
            "O que voce quer fazer agora?",
            "1) Realizar mais uma operacao no resultado",
            "2) Imprimir o resultado",
        )
        if console.ask_int() != 1:
            return module


def main(argv: list[str] | None = None) -> int:
    """Run a module loaded from a file or built from menus, plot it and optionally save it."""
    _parse_args(argv, "Simulate signals through series, parallel and feedback circuits.")
    console = _Console(sys.stdin, sys.stdout)
    console.say(
        HEADER,
        "Qual simulacao voce gostaria de fazer?",
        "1) Circuito advindo de arquivo",
        "2) Sua propria sequencia de operacoes",
    )
    mode = console.ask_int()
    signal = _ask_signal(console)

    module = _load_module(console) if mode == 1 else _build_module(console)
    if module is None:
        return 1

    try:
        output = module.process(signal)
    except ValueError as error:
        console.say(str(error))
        return 1
    output.plot("Resultado final", file=console.out)

    console.say(
        "Voce gostaria de salvar o circuito em um outro arquivo?",
        "1) Sim",
        "2) Nao",
    )
    if console.ask_int() == 1:
        console.say("Qual o nome do arquivo a ser escrito?")
        path = console.ask_word("Nome: ")
        try:
            ModulePersistence(path).save(module)
        except OSError as error:
            console.say(str(error))
            return 1
    return 0


def _operate(console: _Console, signal: Signal) -> Signal:
    console.say(
        "Qual operacao voce gostaria de fazer?",
        "1) Amplificar",
        "2) Somar",
        "3) Derivar",
        "4) Integrar",
    )
    choice = console.ask_int()
    if choice == 1:
        console.say("Qual o ganho dessa amplificacao?")
        return Amplifier(console.ask_float("g = ")).process(signal)
    if choice == 2:
        console.say("Informe mais um sinal para ser somado")
        return Adder().process(signal, _ask_signal(console))
    if choice == 3:
        return Derivative().process(signal)
    if choice == 4:
        return Integrator().process(signal)
    return signal


def classic_main(argv: list[str] | None = None) -> int:
    """Run the cruise-control simulation or a chain of single operations on one signal."""
    _parse_args(argv, "Cruise-control simulation and step-by-step signal operations.")
    console = _Console(sys.stdin, sys.stdout)
    console.say(
        HEADER,
        "Qual simulacao voce gostaria de fazer?",
        "1) Piloto Automatico",
        "2) Sua propria sequencia de operacoes",
    )
    mode = console.ask_int()
    if mode == 1:
        signal = _ask_signal(console)
        console.say("Qual o ganho do acelerador?")
        speed = GainFeedback(console.ask_float("g = ")).process(signal)
        Chart("Velocidade do Carro", speed).plot(console.out)
    elif mode == 2:
        signal = _ask_signal(console)
        while True:
            signal = _operate(console, signal)
            console.say(
                "O que voce quer fazer agora?",
                "1) Realizar mais uma operacao no resultado",
                "2) Imprimir o resultado para terminar",
            )
            choice = console.ask_int()
            if choice == 1:
                continue
            if choice == 2:
                Chart("Resultado Final", signal).plot(console.out)
            break
    return 0