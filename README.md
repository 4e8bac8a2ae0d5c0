# algonotes

Compact, self-contained algorithm implementations in pure Python with no
third-party dependencies. Each module covers one topic and can be used on its
own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.bittricks` | `flp2`, `clp2`, `nearest_power_2` on 32-bit values; `bit_reverse(num, bits=32, signed=False)` |
| `algonotes.bitcount` | population count: `bitcount(k, bits=32)` for 8, 32 or 64 bits, and `iterative_count` |
| `algonotes.gcd` | Euclidean (`gcd1`, `gcd2`) and binary (`bgcd1`, `bgcd2`, `bgcd3`) GCD |
| `algonotes.floathack` | single-precision bit tricks: `as_int`, `as_float`, `negate_float`, `abs_float`, `flog2`, `fexp2`, `fpow`, `fsqrt`, `frsqrt`, `frsqrt2`, `frsqrt3` |
| `algonotes.crc` | table-driven `crc32` |
| `algonotes.fnv` | `fnv1_32`, `fnv1a_32`, `fnv1_64`, `fnv1a_64` over little-endian words |
| `algonotes.jenkins` | one-at-a-time `jenkins` hash |
| `algonotes.murmur` | 32-bit `murmur3` |
| `algonotes.fibonacci_hash` | `fibonacci_hash`, `fibonacci_hash_opt`, `is_power_of_two`, `number_of_bits` |
| `algonotes.bloom_filter` | `BloomFilter` built from any number of hash functions |
| `algonotes.count_min_sketch` | `CountMinSketch` frequency estimator |
| `algonotes.determinant` | cofactor-expansion `det` and pivoting `determinant` |
| `algonotes.distributions` | `BetaDistribution`, `BetaParams` and `DirichletDistribution` samplers |
| `algonotes.kdtree` | `KDTree` with nearest-neighbour search, and `squared_distance` |
| `algonotes.ternary_tree` | `TernarySearchTree` string set |
| `algonotes.huffman` | Huffman `compress` / `decompress` of bytes, `HuffmanError` |
| `algonotes.csv_reader` | `CsvReader`, `Column` and `CsvError` for column-selected reading of delimited files |

## Examples

Bit tricks and GCD:

```python
from algonotes.bittricks import nearest_power_2, flp2, bit_reverse
from algonotes.gcd import gcd1, bgcd1

nearest_power_2(10)                  # 16
flp2(7)                              # 4
bit_reverse(1)                       # 0x80000000
bit_reverse(-2, signed=True)         # 0x7FFFFFFF
gcd1(19377, 721) == bgcd1(19377, 721)   # True
```

Hashing byte strings:

```python
from algonotes.fnv import fnv1a_32
from algonotes.jenkins import jenkins
from algonotes.murmur import murmur3

hex(fnv1a_32(b"hello world"))   # '0xf6e6f1ae'
hex(jenkins(b"hello world"))    # '0x3e4a5a57'
hex(murmur3(b"hello world"))    # '0x5e928f0f'
```

A Bloom filter over several of those hashes. Each hash function is called
with the value and its result is reduced modulo the filter size:

```python
from algonotes.bloom_filter import BloomFilter
from algonotes.fnv import fnv1_32, fnv1a_32
from algonotes.jenkins import jenkins
from algonotes.murmur import murmur3

bf = BloomFilter(1024, fnv1_32, fnv1a_32, murmur3, jenkins)
bf.add(b"death")
bf.add(b"war")
b"death" in bf    # True: added values are always found
bf.count()        # 2
```

Determinants:

```python
from algonotes.determinant import det, determinant

det([[1, 0], [-1, 2]])                          # 2.0
determinant([[1, 0, 0], [0, 2, 0], [0, 0, 3]])  # 6.0
```

Sampling:

```python
import random
from algonotes.distributions import BetaDistribution, DirichletDistribution

rng = random.Random(1)
beta = BetaDistribution(0.1, 1.0)
beta(rng)                             # a value in [0, 1]
str(BetaDistribution(2, 3))           # '~Beta(2,3)'
BetaDistribution.parse("~Beta(2,3)")  # BetaDistribution(2.0, 3.0)
sum(DirichletDistribution(8)(rng))    # 1.0 (up to rounding)
```

Nearest neighbour in a k-d tree:

```python
from algonotes.kdtree import KDTree

tree = KDTree([(70, 721), (343, 858), (207, 313), (479, 449)], dim=2)
tree.neighbour((438, 681))   # the closest stored point
print(tree.render())         # coordinates level by level
```

Ternary search tree:

```python
from algonotes.ternary_tree import TernarySearchTree

tree = TernarySearchTree(["cat", "car", "cart"])
"car" in tree     # True
tree.remove("car")
len(tree)         # 2
```

Huffman coding:

```python
from algonotes.huffman import compress, decompress

packed = compress(b"abcabcabcabc")
decompress(packed)   # b'abcabcabcabc'
```

Reading selected columns of a CSV file:

```python
from algonotes.csv_reader import Column, CsvReader

with CsvReader("data.csv", [Column("name", required=True), "age"]) as reader:
    while reader.read_line():
        print(reader.row())   # {'age': ..., 'name': ...}
```

`CsvReader.process(func, offset, length)` calls `func(row, lineno)` for each
line instead, stopping when `func` returns a false value. A missing file, an
empty file or a missing required column raises `CsvError`.

## Command line

A small demonstration of the Huffman coder is installed as a command. It
compresses each text given as an argument, or a fixed set of sample strings
when none are given, and prints the compressed form in hexadecimal followed by
the result of decompressing it:

```
algonotes-huffman
algonotes-huffman "some text" "more text"
```

## What it does not do

The package has no summation helpers, linear-system solvers, Fourier
transforms or stand-alone pseudo-random generators; the samplers in
`algonotes.distributions` draw from a `random.Random` you pass in.