# parity_check

A tiny library that describes whether an integer is even or odd.

## Installation

```
pip install .
```

## Usage

```python
from parity_check.check_number import check_number

check_number(4)    # "The number is even."
check_number(-3)   # "The number is odd."
check_number(0)    # "The number is even."
```

`check_number` accepts any integer, including negative and very large
values, and returns one of two fixed sentences, also available as
module constants:

- `EVEN_MESSAGE`: `"The number is even."`
- `ODD_MESSAGE`: `"The number is odd."`

Passing anything that is not an integer (a float or a string, for
example) raises `TypeError`.

## What it does not do

The package is a library only: it installs no command-line program,
and it neither reads input nor prints anything itself.

## Running the tests

```
pip install .[test]
pytest
```