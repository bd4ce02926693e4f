# cptoolkit

Classic competitive-programming algorithms in plain Python, with no third-party dependencies.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `cptoolkit.modmath` | `MOD` (998244353), `md`, `mul_mod`, `pwr`, `ext_gcd`, `modinv`, `Factorials` (with `ncr`), `prime_factor_table`, `sieve`, `ncr_table`, `is_prime` (Miller-Rabin), `count_divisors`, `lagrange_polynomial` |
| `cptoolkit.bitranges` | `forward_distinct` / `reverse_distinct`: for each index, the distinct bitwise-AND values of the subarrays ending or starting there, as `Run(start, end, value)` records |
| `cptoolkit.bridges` | `find_bridges(n, edges)`: the bridges of an undirected graph on vertices `1..n`, each as `(smaller, larger)` |
| `cptoolkit.convexhull` | `cross(a, b, c)`, `convex_hull(points)`: hull vertices counter-clockwise (monotone chain), collinear points dropped; three or fewer points are returned unchanged |
| `cptoolkit.dsu` | `DSU` with path compression, and `RollbackDSU` with union by size, parity tracking and `rollback()`; both keep a `connected` count |
| `cptoolkit.floydwarshall` | `floyd_warshall(dist)`: all-pairs shortest paths from a square matrix (use `math.inf` for missing edges); the input is not modified |
| `cptoolkit.hamiltonian` | `shortest_hamiltonian_path(cost)`: cheapest path from vertex 0 through every vertex, returned as `HamiltonianPath(cost, order)` |
| `cptoolkit.kmp` | `prefix_function(seq)`, `kmp_search(text, pattern)`: overlapping match positions in any sequences |
| `cptoolkit.lcs` | `longest_common_subsequence(a, b)` |
| `cptoolkit.lis` | `longest_increasing_subsequence(values)`: strictly increasing, O(n log n) |
| `cptoolkit.manacher` | `palindrome_counts(seq)` (`PalindromeCounts(odd, even)`), `longest_palindromes_from(seq)` |
| `cptoolkit.matrix` | `Matrix(rows, cols=None, mod=MOD)` with `identity`, `*`, `power` and `determinant`, all modulo `mod` |
| `cptoolkit.point` | `Point`, an immutable 2-D vector with epsilon comparisons, arithmetic, `dot`, `cross`, `proj`, `unit_vector`, `rotate_cw`, `rotate_ccw`, `reflect`; helpers `to_rad`, `to_deg`, `eq`, `lt` |

## Examples

```python
from cptoolkit.modmath import pwr, modinv, Factorials
from cptoolkit.kmp import kmp_search
from cptoolkit.dsu import DSU
from cptoolkit.matrix import Matrix

pwr(2, 10, 1_000_000_007)            # 1024
modinv(3, 7)                         # 5
Factorials(10, 998244353).ncr(5, 2)  # 10

kmp_search([1, 2, 1, 2, 1], [1, 2, 1])  # [0, 2]

d = DSU(4)
d.union(1, 2)                        # True
d.find(2) == d.find(1)               # True

fib = Matrix(2)
fib[0][0] = fib[0][1] = fib[1][0] = 1
fib.power(10)[0][1]                  # 55
```

Graph helpers in `bridges` use 1-based vertex numbering (`1..n`); the matrix-based ones (`floyd_warshall`, `shortest_hamiltonian_path`) index from 0. Modular functions default to the modulus 998244353. Functions that cannot produce a result, such as `modinv` for a non-invertible value or `Matrix` multiplication with mismatched shapes, raise `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```