# wildwater

Tools for reading a water-distribution network described as semicolon-separated
lines and summarising it per treatment plant.

## Modules

- `wildwater.avl`: `PlantTree`, an AVL tree of `PlantNode` objects keyed by plant
  identifier (identifiers are cut to 31 characters). `PlantTree.insert` returns
  the node for an identifier, creating it if needed; `search`, `height`, `len()`,
  ascending iteration and `descending()` are also provided. The lower-level
  functions `insert_plant`, `search_plant`, `rotate_left`, `rotate_right`,
  `node_height` and `node_balance` work on bare nodes.
- `wildwater.csv_parser`: `parse_csv_line` turns one line into a `Segment`
  (plant, upstream and downstream identifiers, volume or capacity, leak
  percentage, and a `LineType`). Empty fields are skipped, so later columns
  shift left. A `-` identifier becomes an empty string and a missing or `-`
  number becomes `-1.0`. A line that is empty or 1024 characters or longer
  raises `ValueError`. A line with a volume, no downstream identifier and no
  leak percentage is a `LineType.PLANT`; every other line is a
  `LineType.CAPTURE`. `parse_float` reads the leading number of a token.
- `wildwater.histo`: accumulates, for every plant,
  - its maximum capacity (`HistoMode.MAX`, `"max"`, written to `vol_max.dat`),
  - the total volume captured by its sources (`HistoMode.SRC`, `"src"`, written
    to `vol_captation.dat`),
  - the volume really treated once leaks are taken off (`HistoMode.REAL`,
    `"real"`, written to `vol_traitement.dat`).

  Only lines whose first column is `-` are counted. Plant lines set the
  capacity of the plant named in the second column; capture lines add to the
  plant named in the third column. A capture line without a leak percentage
  counts as fully treated.

Output files have a header line and then one `identifier;volume` line per plant,
in descending identifier order; plants with no positive value are left out.

## Installation

```
pip install .
```

## Library use

```python
from wildwater.histo import HistoMode, build_plant_tree, format_histo_results, handle_histo_data

lines = [
    "-;Plant A;-;3442;-",
    "-;Source 1;Plant A;100;10",
]
tree = build_plant_tree(lines)
print(format_histo_results(tree, HistoMode.REAL))
# identifier;real volume (k.m3)
# Plant A;90

# Read a data file ("-" reads standard input) and write vol_max.dat in the current directory
handle_histo_data("max", "network.csv", ".")
```

`write_histo_results` and `handle_histo_data` return the path of the file they
wrote and print a confirmation line. Lines that cannot be parsed are skipped.
Errors, such as an unknown mode, a data file that cannot be opened or an output
file that cannot be created, are raised as `wildwater.histo.HistoError`.

## Command line

```
wildwater ARG...
```

The command prints how many arguments it was given and lists each of them.

## What the package does not do

The `wildwater` command does not build histograms: it only echoes its
arguments. To produce the `.dat` files, call `wildwater.histo.handle_histo_data`
from Python. The package draws no charts from those files.

## Tests

```
pip install .[test]
pytest
```