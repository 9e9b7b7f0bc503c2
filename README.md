# labstructs

Classic data structures and algorithms in plain Python, with no third-party
dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `labstructs.queues` | `LinkedQueue` (unbounded), `CircularQueue` (fixed-size ring, default size 5), `QueueFullError`, `QueueEmptyError` |
| `labstructs.maxheap` | `MaxHeap` with a capacity (default 100), key increase, priority change and deletion by index |
| `labstructs.notation` | Conversions between infix, prefix and postfix expressions |
| `labstructs.sparse` | `SparseEntry` and `SparseMatrix` with addition (`+`) and multiplication (`@`) in triplet form |
| `labstructs.bst` | `BinarySearchTree` with traversals, minimum/maximum and node counts |
| `labstructs.avl` | Self-balancing `AVLTree` |
| `labstructs.bplustree` | `BPlusTree` key/value store with range queries and linked leaves |
| `labstructs.adjacency` | Undirected `AdjacencyListGraph` with BFS, DFS and friend suggestions |
| `labstructs.dijkstra` | `dijkstra` shortest distances on a weighted adjacency matrix, `render_distances` |
| `labstructs.huffman` | `HuffmanNode`, `build_tree`, `codes`, `encode`, `decode` |
| `labstructs.tictactoe` | Board helpers, `evaluate`, `minimax`, `find_best_move`, `check_winner`, `play`, `Outcome` |

Errors are raised as exceptions: taking from an empty queue raises
`QueueEmptyError`, adding to a full `CircularQueue` raises `QueueFullError`,
an empty or full `MaxHeap` raises `IndexError` or `OverflowError`, a missing
`BPlusTree` key raises `KeyError` from `find`, and malformed expressions,
mismatched matrix shapes or invalid graph vertices raise `ValueError` or
`IndexError`.

## Installation

```
pip install labstructs
```

To run the test suite:

```
pip install "labstructs[test]"
pytest
```

## Examples

Queues:

```python
from labstructs.queues import CircularQueue

queue = CircularQueue(3)
for value in (10, 20, 30):
    queue.enqueue(value)
print(queue.is_full())      # True
print(queue.dequeue())      # 10
queue.enqueue(40)           # wraps around
print(list(queue))          # [20, 30, 40]
print(queue.render())       # Queue elements: 20 30 40
```

Max-heap:

```python
from labstructs.maxheap import MaxHeap

heap = MaxHeap()
for key in (10, 40, 20, 5, 25):
    heap.insert(key)
print(heap.peek())          # 40
heap.change_priority(3, 50)
print(heap.extract_max())   # 50
```

Expression notation:

```python
from labstructs.notation import infix_to_postfix, postfix_to_infix, infix_to_prefix

print(infix_to_postfix("a+b*c"))   # abc*+
print(postfix_to_infix("abc*+"))   # (a+(b*c))
print(infix_to_prefix("a+b*c"))
```

Operands are single letters or digits; the operators are `+ - * /`.

Search trees:

```python
from labstructs.avl import AVLTree
from labstructs.bst import BinarySearchTree

tree = AVLTree([30, 10, 20, 5, 40, 50, 25])
tree.delete(30)
print(tree.inorder())       # [5, 10, 20, 25, 40, 50]
print(25 in tree)           # True

bst = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
print(bst.level_order())    # [50, 30, 70, 20, 40, 60, 80]
print(bst.height(), len(bst), bst.count_leaves())   # 3 7 4
```

B+ tree:

```python
from labstructs.bplustree import BPlusTree

tree = BPlusTree(order=4)
for key in range(1, 11):
    tree.insert(key, key * 100)
print(tree.find(7))             # 700
print(tree.find_range(3, 5))    # [(3, 300), (4, 400), (5, 500)]
tree.delete(7)
print(7 in tree)                # False
print(tree.render_leaves())
```

Sparse matrices:

```python
from labstructs.sparse import SparseMatrix

a = SparseMatrix.from_dense([[1, 0], [0, 2]])
b = SparseMatrix.from_dense([[0, 3], [4, 0]])
print((a + b).to_dense())   # [[1, 3], [4, 2]]
print((a @ b).to_dense())   # [[0, 3], [8, 0]]
print(a.render())
```

Graphs:

```python
from labstructs.adjacency import AdjacencyListGraph
from labstructs.dijkstra import dijkstra

graph = AdjacencyListGraph(5)
for u, v in [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]:
    graph.add_edge(u, v)
print(graph.bfs(0))
print(graph.dfs(0))
print(graph.friend_suggestions(0))   # ([1, 4], [2, 3])

weights = [
    [0, 4, 0, 0, 0, 0],
    [4, 0, 8, 0, 0, 0],
    [0, 8, 0, 7, 0, 4],
    [0, 0, 7, 0, 9, 14],
    [0, 0, 0, 9, 0, 10],
    [0, 0, 4, 14, 10, 0],
]
print(dijkstra(weights, 0))   # [0, 4, 12, 19, 26, 16]
```

In the adjacency list each vertex's neighbours are listed newest edge first.
`dijkstra` returns `None` for vertices that cannot be reached.

Huffman coding:

```python
from labstructs.huffman import build_tree, codes, encode, decode

root = build_tree("abcdef", [5, 9, 12, 13, 16, 45])
print(codes(root))
bits = encode(root, "face")
print(decode(root, bits))   # face
```

Tic-tac-toe:

```python
from labstructs.tictactoe import empty_board, find_best_move, check_winner, Outcome

board = empty_board()
board[0][0] = "O"
print(find_best_move(board))                    # best cell for X
print(check_winner(board) is Outcome.ONGOING)   # True
```

## Commands

```
labstructs-notation CONVERSION EXPRESSION
```

Converts one expression and prints it. `CONVERSION` is one of
`infix-to-postfix`, `postfix-to-infix`, `infix-to-prefix`, `prefix-to-infix`,
`prefix-to-postfix`, `postfix-to-prefix`; for example
`labstructs-notation infix-to-postfix "a+b*c"` prints
`Postfix expression: abc*+`.

```
labstructs-tictactoe
```

Plays one game on the terminal: the computer is X and moves first, you are O
and enter a row and column (0 to 2) separated by a space.

```
labstructs-friends [INPUT]
```

Reads whitespace-separated integers from `INPUT` or standard input: the
number of users, the number of friendships, that many pairs of user ids, and
the user to report on. It prints the adjacency list, the user's direct
friends and friend suggestions (friends of friends).

```
labstructs-bplustree [--order N]
```

Reads one command per line from standard input: `i KEY VALUE` inserts,
`f KEY` finds, `d KEY` deletes, `p` prints the tree level by level, `l`
prints the leaves, `x` prints the height and `q` quits. Keys and values are
integers; the default order is 4.

## What the package does not do

There are no linked-list, stack or min-heap types, no B-tree, no graph stored
as an adjacency matrix and no topological sort. The B+ tree lives in memory
only and is not saved anywhere between runs of `labstructs-bplustree`.