# sinalsim

A small simulator for discrete signals passed through blocks: amplifiers,
differentiators, integrators and adders, combined into series, parallel and
feedback modules. Results are drawn as text-mode charts in the terminal, and
module layouts can be saved to and read back from plain text files.

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Both commands are interactive menus (the prompts are in Portuguese). They read
whitespace-separated answers from standard input, so they can also be driven by
piping the answers in. Neither takes options beyond `--help`.

```
sinalsim
```

1. Choose the mode: `1` loads a circuit from a file, `2` builds one from menus.
2. Choose the input signal, 60 samples long: `1` the cosine
   `5 + 3*cos(n*pi/8)`, `2` a constant (you are asked for its value), `3` a
   ramp (you are asked for its slope). Any other answer gives the cosine.
3. Either give the file name to load, or pick a structure (`1` series,
   `2` parallel, `3` series with feedback; anything else means series) and add
   operations one at a time: `1` amplify (asks for the gain), `2`
   differentiate, anything else integrate.
4. The output is plotted as "Resultado final".
5. Answer `1` to append the circuit to a file you name.

The command exits with status 1 when the file cannot be read or is malformed,
when processing fails (for instance an empty module), or when saving fails;
otherwise with 0. An answer that is missing or not a number counts as 0.

```
sinalsim-classic
```

offers `1` an autopilot simulation: pick an input signal and a throttle gain,
and the speed computed by `GainFeedback` is plotted as "Velocidade do Carro";
or `2` a chain of single operations on one signal: amplify, add a second
signal you choose, differentiate or integrate, repeated for as long as you
answer `1`; answering `2` plots the result as "Resultado Final".

## Library use

```python
from sinalsim.signal import Signal
from sinalsim.circuits import Amplifier, Derivative
from sinalsim.modules import SeriesModule

ramp = Signal([0.5 * n for n in range(60)])

chain = SeriesModule()
chain.add(Amplifier(2.0))
chain.add(Derivative())

result = chain.process(ramp)
result.plot("Amplified slope")
```

### Signals (`sinalsim.signal`)

`Signal(values)` holds an immutable, non-empty sequence of floats; an empty
one raises `ValueError`. `Signal.constant(value, length)` builds a flat signal
(`length` must be positive). Signals support `len()`, iteration, indexing and
slicing (which return the raw samples), equality and hashing. `values()`
returns a list copy, `plot(title, file=None)` draws a chart followed by a blank
line, and `dump(limit=None, file=None)` prints `index- value` lines for the
first `limit` samples and then `--`.

### Circuits (`sinalsim.circuits`)

- `Circuit` is the base class; every instance gets the next sequential `id`,
  `Circuit.last_id()` returns the latest one and `describe()` returns
  `"Circuito com ID <id>"`.
- `SISOCircuit` and `MISOCircuit` are the abstract one-input and two-input
  bases.
- `Amplifier(gain)` multiplies every sample by `gain`.
- `Derivative` outputs the first sample followed by successive differences.
- `Integrator` outputs the running sum.
- `Adder().process(first, second)` adds two signals sample by sample,
  truncated to the shorter one.
- `Pilot(gain)` amplifies by `gain` and then integrates.
- `GainFeedback(gain)` is a first-order loop: the first output is the first
  input times `gain`, and each later output moves towards the input by `gain`
  times the remaining difference.

### Modules (`sinalsim.modules`)

Modules are themselves single-input circuits, so they can be nested. `add()`
appends a circuit, `circuits()` returns the members in order, and `describe()`
lists the module's id and its members' ids.

- `SeriesModule` feeds each circuit's output into the next.
- `ParallelModule` feeds the same input to every circuit and sums the outputs.
- `FeedbackModule` runs its circuits in series inside a unit negative-feedback
  loop: each step processes the input minus the previous output.

Processing an empty module raises `ValueError`.

### Charts (`sinalsim.chart`)

`Chart(title, values)` renders a fixed-size text chart of the first 61 samples
on a 0 to 10 vertical scale of 16 rows; values at or below 0 sit on the axis
and values at or above 10 on the top row. `render()` returns the text and
`plot(file=None)` writes it to standard output or `file`.

## Saving circuits (`sinalsim.persistence`)

`ModulePersistence(path)` saves a module with `save(module)`, appending to the
file, and reads one back with `load()`. `write_module(module, stream)` and
`read_module(stream)` do the same on open text streams.

The format is whitespace-separated tokens: `S`, `P` or `R` opens a series,
parallel or feedback module, `A <gain>` is an amplifier, `D` a differentiator,
`I` an integrator, and `f` closes the current module:

```
S
A 2
P
I
D
f
f
```

A malformed description (unknown token, missing or invalid gain, wrong first
token, or anything after the outer module) raises `FormatError`, a subclass of
`ValueError`; a missing file raises the usual `FileNotFoundError`. Writing a
circuit that has no token in the format raises `TypeError`.

## Limitations

- The format stores only modules, amplifiers, differentiators and
  integrators: `Adder`, `Pilot` and `GainFeedback` cannot be saved.
- `save()` always appends, so saving into an existing file leaves a file that
  `load()` rejects because of the trailing content.
- `sinalsim-classic` does not save or load anything, and neither command has a
  non-interactive mode.