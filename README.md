# pushswap

The two stacks of the push_swap puzzle and the eleven operations on them.

## Installing

```
pip install .
```

## Library

`pushswap.stacks.StackPair` holds two stacks, `a` and `b`. Each is a plain
list whose first item is the top of the stack.

```python
from pushswap.stacks import StackPair

stacks = StackPair([3, 1, 2], [])
stacks.swap_a()      # a = [1, 3, 2]
stacks.push_b()      # a = [3, 2], b = [1]
stacks.rotate_a()    # a = [2, 3]
print(stacks.a, stacks.b)
```

| Method | Effect |
|--------|--------|
| `swap_a`, `swap_b`, `swap_both` | swap the top two values |
| `push_a` | move the top of `b` onto `a` |
| `push_b` | move the top of `a` onto `b` |
| `rotate_a`, `rotate_b`, `rotate_both` | move the top value to the bottom |
| `reverse_rotate_a`, `reverse_rotate_b`, `reverse_rotate_both` | move the bottom value to the top |

An operation that does not have enough values to work on does nothing.

Both arguments of `StackPair` are optional and default to an empty stack.
Every value must be an `int` (not a `bool`); anything else raises
`pushswap.stacks.PushSwapError`.

## Command line

```
pushswap 3 1 2
```

loads the arguments into stack `a`, leaves `b` empty, and prints both stacks,
top first, each value followed by a space:

```
Stack A: 3 1 2 
Stack B: 
```

Arguments are read the way C's `atoi` reads them: leading whitespace and an
optional sign are accepted, digits are read up to the first non-digit, and
text with no leading digits counts as `0`. Values too large for a 64-bit long
are clamped to it and then narrowed to a 32-bit int.

`pushswap.cli` also provides `atoi(text)` and `format_stack(label, values)`,
the two helpers the command uses.

## What it does not do

The package does not sort. The command prints the stacks it built and applies
no operations; it does not work out or print a sequence of operations, and
there is no checker that replays one. Arguments are not validated: non-numeric
text, duplicates and out-of-range numbers are accepted as described above.

## Tests

```
pip install .[test]
pytest
```