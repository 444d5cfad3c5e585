# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Modules

- `dsakit.recursion`: `factorial` and `factorial_iterative`; `fib` and
  `fib_iterative` (the sequence 1, 1, 2, 3, 5, ...) and `fib_memo`
  (0, 1, 1, 2, ...); `sum_natural` and `sum_natural_iterative`; `power` and
  `power_fast` (repeated squaring); `hanoi`, returning the list of
  `(from, to)` moves; `taylor_exp`, `horner_exp` and `horner_exp_iterative`
  for the series of `e**x`; `combinations` and `ncr` for binomial
  coefficients; and `countdown`, `tree_sequence`, `indirect_sequence`,
  `nested` and `accumulated_sum`, which show the shapes of direct, tree,
  indirect and nested recursion and of a counter shared across calls.
- `dsakit.stacks`: `ArrayStack(size)` with `push`, `pop`, `peek(index)`
  (1-based from the top), `top`, `is_empty`, `is_full`; and the unbounded
  `LinkedStack`. Both iterate from top to bottom and raise `StackOverflow` or
  `StackUnderflow`.
- `dsakit.queues`: `ArrayQueue(size)` (freed slots are not reused),
  `CircularQueue(size)` (holds at most `size - 1` items) and the unbounded
  `LinkedQueue`, all with `enqueue` and `dequeue`, raising `QueueFull` or
  `QueueEmpty`.
- `dsakit.expressions`: `is_balanced`, `precedence`, `is_operand`,
  `infix_to_postfix` (operators `+ - * /`),
  `infix_to_postfix_with_parens` (adds parentheses and right-associative `^`,
  raising `ValueError` on unmatched parentheses) and `evaluate_postfix` for
  single-digit operands, with division truncating toward zero.
- `dsakit.heap`: max-heap `insert(heap, n)` and `delete(heap, n)` on a 1-based
  list, and `heap_sort(values)`.
- `dsakit.graphs`: `bfs(graph, start)` and `dfs(graph, start)` over an
  adjacency matrix whose vertices are numbered from 1.
- `dsakit.trees`: a binary tree `Node` (data, children and height),
  `node_height(p, q)`, `preorder` and `postorder`.
- `dsakit.matrices`: `LowerTriangularMatrix(n)` with 1-based `set`, `get`,
  `rows` and compact storage of the n*(n+1)/2 lower entries.
- `dsakit.grading`: `grade(mark)` giving A/B/C/D/F for a mark out of 100, and
  the `StudentReport` dataclass with `total`, `average` (truncated) and
  `overall_grade`.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.recursion import factorial, hanoi, ncr
from dsakit.expressions import infix_to_postfix, evaluate_postfix, is_balanced
from dsakit.stacks import ArrayStack
from dsakit.heap import heap_sort

factorial(5)                       # 120
ncr(5, 3)                          # 10
hanoi(2, 1, 2, 3)                  # [(1, 2), (1, 3), (2, 3)]

infix_to_postfix("a+b*c-d/e")      # 'abc*+de/-'
evaluate_postfix("234*+82/-")      # 10
is_balanced("((a+b)*(c-d)))")      # False

stack = ArrayStack(5)
stack.push(10)
stack.push(20)
stack.top()                        # 20

heap_sort([10, 20, 30, 25, 5, 40, 35])  # [5, 10, 20, 25, 30, 35, 40]
```

## Command-line tools

```
dsakit-grades
```

reads from standard input the number of students, then for each a name and
marks in English, language, maths, science and computer, and prints a grade
per subject, the sum, the average and the overall grade.

```
dsakit-lowertriangle
```

reads a dimension and then a full square matrix from standard input and
prints its lower triangular part, with zeros above the diagonal.

Both exit with status 1 and a message on standard error if the input ends
early or holds something that is not a whole number where one is expected.

## What it does not do

The tree module offers nodes, heights and traversals only: there is no
insertion, deletion, search or balancing of trees. The grading tool keeps
nothing between runs; marks are read, reported and forgotten.

## Running the tests

```
pip install .[test]
pytest
```