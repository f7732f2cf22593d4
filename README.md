# clubsim

`clubsim` replays one working day of a computer club from an input file.
It tracks who arrives, who takes which station, who waits in the queue and
who leaves. It prints every event, including the errors and the events the
club produces itself. At closing time it prints each station's revenue and
total usage time.

## Installation

```
pip install .
```

## Usage

```
clubsim day.txt
```

The command takes exactly one argument, the path of the input file. If the
argument is missing, or if there are more arguments, it prints
`Usage: clubsim <filename>` to standard error and exits with status 1.
When the file cannot be loaded or processed, the error message goes to
standard error.

### Input format

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
12:43 4 client2
```

1. The number of stations, as digits only.
2. The opening and closing times, `HH:MM HH:MM`, with times from `00:00` to `23:59`.
3. The price per started hour of use, as digits only.
4. Events, one per line: `HH:MM <id> <client>`, or `HH:MM 2 <client> <station>`.
   Client names use only `a-z`, `0-9`, `_` and `-`.

Lines must match these forms exactly. Extra spaces or trailing characters
are not accepted.

Incoming event ids:

| id | meaning                                                        |
|----|----------------------------------------------------------------|
| 1  | client arrives                                                 |
| 2  | client takes a station (the line ends with the station number) |
| 3  | client waits in the queue                                      |
| 4  | client leaves                                                  |

If a line does not fit the place where it appears, nothing is processed.
The offending line is reported as the error message. A file that ends
before the price line is reported as `incomplete header`.

### Output

The output is printed in this order:

1. The opening time.
2. Every event, as `HH:MM <id> <payload>`. This includes the events the club produces:

| id | meaning                                                  |
|----|----------------------------------------------------------|
| 11 | client leaves (queue full, or still inside at closing)   |
| 12 | a waiting client takes the station that was freed        |
| 13 | error: `NotOpenYet`, `YouShallNotPass`, `ClientUnknown`, `PlaceIsBusy`, `ICanWaitNoLonger!` |

3. The closing time.
4. One line per station: `<station> <revenue> <HH:MM of use>`.

At closing time, the clients still inside leave in alphabetical order.
Each started hour of a session is billed in full at the day's price.

## Library use

```python
from clubsim.app import App

App("day.txt").run()
```

`App` raises `FileDoesNotExistError`, `UnableToOpenFileError` or
`InvalidFileFormatError`. All three are subclasses of `AppError`.

The pieces can also be used on their own:

- `clubsim.parser.Parser` reads the file line by line into records.
- `clubsim.orchestrator.Orchestrator` wires up the components and feeds events through `dispatch`. Its optional `stream` argument takes any `clubsim.logsystem.LogStream`. `ConsoleLogStream` accepts an output file object.
- `clubsim.timeutils` holds `parse_time` and `format_time`, which convert between `HH:MM` and minutes.

## Limitations

- The output is plain text only: standard output, or whatever `LogStream` is given to `Orchestrator`. Nothing is stored between runs.
- Billing assumes that every client who leaves holds a station. A client who leaves without one ends the run with an error. This also applies to a client who is still inside at closing time without a station. The lines printed up to that point remain.

## Tests

```
pip install .[test]
pytest
```