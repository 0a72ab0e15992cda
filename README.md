# arenakit

A compact set of algorithms that come up again and again in contest-style
problems, written as plain Python with no third-party dependencies.

## Installation

```
pip install arenakit
```

To run the test suite:

```
pip install "arenakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `arenakit.modular` | `power_mod`, `power`, `inverse`, and `Binomial` for `n choose r` modulo a prime |
| `arenakit.fibonacci` | `mat_mul`, `mat_pow` and `fib`, which computes Fibonacci numbers by 2×2 matrix exponentiation |
| `arenakit.modint` | `ModInt`, an integer that stays reduced modulo a fixed modulus, with arithmetic and comparison operators |
| `arenakit.search` | `ternary_search`, which finds an argmax of a unimodal function over an integer range |
| `arenakit.debug` | `format_value`, `split_names`, `format_debug` and `debug` for readable dumps of nested values |
| `arenakit.bittrie` | `BitTrie`, a binary trie over fixed-width integers that answers maximum-XOR queries |
| `arenakit.manacher` | `Manacher`, for palindrome radii and O(1) palindrome checks on substrings |
| `arenakit.sparse_table` | `SparseTable`, for O(1) range queries with an idempotent operation |
| `arenakit.interactive` | `second_max_position`, `find_second_max` and `ArrayOracle`, which locate the position of an array's maximum using only second-maximum range queries |

## Examples

Modular arithmetic:

```python
from arenakit.modular import power_mod, Binomial

power_mod(2, 10, 1000)            # 24
binom = Binomial(100, 1_000_000_007)
binom.ncr(5, 2)                   # 10
binom.ncr(3, 5)                   # 0
```

`Binomial.ncr` raises `IndexError` when `n` is beyond the factorial table
given by `limit`.

Fibonacci numbers:

```python
from arenakit.fibonacci import fib

fib(10, 1_000_000_007)            # 55
```

Modular integers:

```python
from arenakit.modint import ModInt

x = ModInt(3, 7)
x.inv()                           # ModInt(5, mod=7)
x.pow(2)                          # ModInt(2, mod=7)
x / 2 + 1                         # plain ints are reduced and combined
```

Ternary search:

```python
from arenakit.search import ternary_search

ternary_search(lambda x: -(x - 42) ** 2, 0, 100)   # 42
```

Debug formatting:

```python
from arenakit.debug import format_debug

format_debug("xs, flag", [1, 2], True)   # '[xs = {1,2} || flag = T]'
```

`debug(names, *args)` prints the same text prefixed with the caller's line
number.

Maximum XOR with a trie:

```python
from arenakit.bittrie import BitTrie

trie = BitTrie(31)
for value in (2, 3, 4):
    trie.insert(value)
trie.query(1)                     # 5, from 4 ^ 1
trie.remove(4)
trie.query(1)                     # 3, from 2 ^ 1
```

`remove` raises `KeyError` for a value that is not stored, and `query` raises
`LookupError` on an empty trie.

Palindromes:

```python
from arenakit.manacher import Manacher

m = Manacher("abacaba")
m.is_palindrome(0, 6)             # True
m.is_palindrome(0, 1)             # False
```

Range minimum with a sparse table (the range is half-open, `[left, right)`):

```python
from arenakit.sparse_table import SparseTable

table = SparseTable([5, 2, 7, 1, 9], min, float("inf"))
table.prod(0, 3)                  # 2
table.prod(2, 2)                  # inf, the identity
```

Finding the maximum with second-maximum queries:

```python
from arenakit.interactive import ArrayOracle, find_second_max

oracle = ArrayOracle([4, 3, 2, 1, 5])
pos = find_second_max(5, oracle.query)   # 5
oracle.answer(pos)                       # checks the claim, raises ValueError if wrong
```

## Command-line tools

`arenakit-fib` prints the `n`-th Fibonacci number modulo 1 000 000 007. It
takes `n` as an argument, or reads it from standard input:

```
arenakit-fib 10
echo 10 | arenakit-fib
```

`arenakit-interactive` runs the maximum search against randomly shuffled
arrays, printing each array followed by every query, the oracle's reply and
the final answer; the elapsed time goes to standard error:

```
arenakit-interactive --tests 10 --seed 1
```

With `--interactive` it reads `n` from standard input, prints `? lo hi`
queries, reads each reply as an integer and prints `! pos`.

## Limits

The remaining modules are libraries only and have no command of their own.
`ternary_search` assumes a unimodal function, and `SparseTable` gives correct
results only for idempotent operations such as `min`, `max` or `gcd`.