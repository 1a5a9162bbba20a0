import io
import math
import sys

import pytest

from sinalsim.chart import Chart
from sinalsim.circuits import Amplifier, Derivative, GainFeedback, Integrator
from sinalsim.cli import classic_main, main, make_input
from sinalsim.modules import ParallelModule, SeriesModule
from sinalsim.persistence import read_module
from sinalsim.signal import Signal


def feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_make_input_constant():
    signal = make_input(2, 3.5)
    assert signal.values() == [3.5] * 60


def test_make_input_ramp():
    signal = make_input(3, 2.0, 5)
    assert signal.values() == [0.0, 2.0, 4.0, 6.0, 8.0]


def test_make_input_cosine():
    signal = make_input(1)
    assert len(signal) == 60
    assert signal[0] == pytest.approx(8.0)
    assert signal[8] == pytest.approx(2.0)
    assert signal[4] == pytest.approx(5.0)


def test_make_input_unknown_choice_is_cosine():
    assert make_input(7, 4.0, 10) == make_input(1, 0.0, 10)


def test_make_input_rejects_empty():
    with pytest.raises(ValueError):
        make_input(2, 1.0, 0)


def test_main_series_constant_amplified(monkeypatch, capsys):
    feed(monkeypatch, "2\n2\n3\n1\n1\n2\n2\n2\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Qual simulacao voce gostaria de fazer?" in out
    assert Chart("Resultado final", [6.0] * 60).render() in out


def test_main_parallel_module(monkeypatch, capsys):
    feed(monkeypatch, "2\n3\n1\n2\n2\n1\n3\n2\n2\n")
    assert main([]) == 0
    module = ParallelModule()
    module.add(Derivative())
    module.add(Integrator())
    expected = module.process(make_input(3, 1.0))
    assert Chart("Resultado final", expected).render() in capsys.readouterr().out


def test_main_loads_module_from_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "circuito.txt").write_text("S\nA 2\nf\n", encoding="utf-8")
    feed(monkeypatch, "1\n2\n3\ncircuito.txt\n2\n")
    assert main([]) == 0
    assert Chart("Resultado final", [6.0] * 60).render() in capsys.readouterr().out


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "1\n2\n3\nausente.txt\n")
    assert main([]) == 1
    assert "Arquivo nao encontrado" in capsys.readouterr().out


def test_main_bad_file_format(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ruim.txt").write_text("X\nf\n", encoding="utf-8")
    feed(monkeypatch, "1\n2\n3\nruim.txt\n")
    assert main([]) == 1
    assert "Resultado final" not in capsys.readouterr().out


def test_main_saves_module(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "2\n2\n1\n1\n1\n2.5\n1\n3\n2\n1\nsaida.txt\n")
    assert main([]) == 0
    with open(tmp_path / "saida.txt", encoding="utf-8") as stream:
        module = read_module(stream)
    assert isinstance(module, SeriesModule)
    first, second = module.circuits()
    assert isinstance(first, Amplifier)
    assert first.gain == 2.5
    assert isinstance(second, Integrator)


def test_classic_autopilot(monkeypatch, capsys):
    feed(monkeypatch, "1\n2\n4\n0.5\n")
    assert classic_main([]) == 0
    expected = GainFeedback(0.5).process(Signal.constant(4.0, 60))
    assert Chart("Velocidade do Carro", expected).render() in capsys.readouterr().out


def test_classic_integrate_ramp(monkeypatch, capsys):
    feed(monkeypatch, "2\n3\n1\n4\n2\n")
    assert classic_main([]) == 0
    expected = Integrator().process(make_input(3, 1.0))
    assert Chart("Resultado Final", expected).render() in capsys.readouterr().out


def test_classic_add_two_signals(monkeypatch, capsys):
    feed(monkeypatch, "2\n2\n1\n2\n2\n3\n2\n")
    assert classic_main([]) == 0
    assert Chart("Resultado Final", [4.0] * 60).render() in capsys.readouterr().out


def test_classic_chained_operations(monkeypatch, capsys):
    feed(monkeypatch, "2\n3\n2\n3\n1\n1\n0.5\n2\n")
    assert classic_main([]) == 0
    assert Chart("Resultado Final", [0.0] + [1.0] * 59).render() in capsys.readouterr().out


def test_classic_cosine_derivative_first_sample(monkeypatch, capsys):
    feed(monkeypatch, "2\n1\n3\n2\n")
    assert classic_main([]) == 0
    expected = Derivative().process(make_input(1))
    assert expected[0] == pytest.approx(5 + 3 * math.cos(0))
    assert Chart("Resultado Final", expected).render() in capsys.readouterr().out


def test_classic_no_plot_when_not_requested(monkeypatch, capsys):
    feed(monkeypatch, "2\n2\n1\n3\n9\n")
    assert classic_main([]) == 0
    assert "Resultado Final" not in capsys.readouterr().out