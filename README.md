# algokit

Classic data structures and algorithms in plain Python, together with two
small runnable programs: a concurrent ride-booking simulation and a
one-shot TCP client/server exchange. The package has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module                   | Contents                                                                 |
| ------------------------ | ------------------------------------------------------------------------ |
| `algokit.graph`          | `Graph`: undirected adjacency lists, `bfs`, `dfs`, `neighbors`           |
| `algokit.linked_list`    | `ListNode`, `SinglyLinkedList`, `from_values`, `to_values`, `merge_two`, `merge_k_lists`, `reorder_list`, `sort_list` |
| `algokit.trees`          | `TreeNode`, `insert_level_order`, `inorder`, `preorder`, `postorder`, `level_order`, `leaves`, `boundary`, `flatten` |
| `algokit.pascal`         | `binomial`, `binomial_memo`, `pascal_rows`, `render`                      |
| `algokit.stack_problems` | `is_valid_brackets`, `next_greater`                                      |
| `algokit.heap_problems`  | `MedianFinder`, `k_largest`                                              |
| `algokit.hashmap`        | `ChainedHashMap`: fixed buckets with chaining                            |
| `algokit.dynamic_array`  | `DynamicArray`: storage that starts empty and doubles when full          |
| `algokit.orderbook`      | `OrderType`, `Order`, `OrderBook`                                        |
| `algokit.rides`          | `Location`, `Driver`, `DriverManager`, `PaymentService`, `NotificationService`, `ThreadPool`, `RideService`, `main` |
| `algokit.tcp`            | `serve_once`, `run_server`, `run_client`, `main`                         |

## Examples

### Graphs

Vertices are the integers `0 .. vertices - 1`; a vertex outside that range
raises `IndexError`. Both traversals return the visit order as a list.
`dfs` is stack-driven: neighbours are pushed in the order they were added,
so the most recently added one is explored first.

```python
from algokit.graph import Graph

g = Graph(5)
for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]:
    g.add_edge(u, v)

g.bfs(0)   # [0, 1, 2, 3, 4]
g.dfs(0)   # [0, 2, 3, 4, 1]
```

### Linked lists

The free functions work on chains of `ListNode` and relink nodes rather
than copying them. `reorder_list` works in place; `sort_list` (merge sort)
and `merge_k_lists` return the new head.

```python
from algokit.linked_list import (
    SinglyLinkedList, from_values, to_values, merge_k_lists, reorder_list, sort_list,
)

to_values(sort_list(from_values([4, 2, 1, 3])))                      # [1, 2, 3, 4]
to_values(merge_k_lists([from_values([1, 4]), from_values([2, 3])])) # [1, 2, 3, 4]

head = from_values([1, 2, 3, 4, 5])
reorder_list(head)
to_values(head)                                                      # [1, 5, 2, 4, 3]

items = SinglyLinkedList()
items.insert_at_end(2)
items.insert_at_beginning(1)
items.insert_at_position(3, 3)   # positions are 1-based; out of range raises IndexError
list(items), len(items)          # ([1, 2, 3], 3)
items.delete_beginning()         # 1 (None when the list is empty)
```

### Binary trees

`insert_level_order` fills the first free slot in level order and returns
the root. The traversal functions return lists of values; `flatten`
rewires the tree in place into a right-leaning chain in preorder.

```python
from algokit.trees import insert_level_order, inorder, level_order, leaves, boundary

root = None
for value in range(1, 9):
    root = insert_level_order(root, value)

level_order(root)   # [1, 2, 3, 4, 5, 6, 7, 8]
inorder(root)       # [8, 4, 2, 5, 1, 6, 3, 7]
leaves(root)        # [8, 5, 6, 7]
boundary(root)      # [1, 2, 4, 8, 5, 6, 7, 3]
```

### Pascal's triangle

`binomial` uses the plain recurrence, `binomial_memo` the same recurrence
with a cache; both raise `ValueError` unless `0 <= r <= n`.
`pascal_rows` builds the rows bottom-up and `render` lays them out as
centred text.

```python
from algokit.pascal import binomial, pascal_rows, render

binomial(5, 2)      # 10
pascal_rows(4)      # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
print(render(5))
```

### Stacks and heaps

```python
from algokit.stack_problems import is_valid_brackets, next_greater
from algokit.heap_problems import MedianFinder, k_largest

is_valid_brackets("{[()]}")   # True
next_greater([2, 1, 3])       # [3, 3, -1]

finder = MedianFinder()
for n in (5, 1, 3):
    finder.add_num(n)
finder.find_median()          # 3.0 (ValueError before any number is added)

k_largest([3, 1, 4, 1, 5], 2) # [5, 4]
```

In `is_valid_brackets`, any character that is not an opening bracket is
treated as closing the most recent one.

### Hash map and dynamic array

`ChainedHashMap` has a fixed number of buckets; a new key goes to the front
of its bucket's chain, and inserting an existing key replaces its value.
`get` raises `KeyError` for a missing key.

```python
from algokit.hashmap import ChainedHashMap
from algokit.dynamic_array import DynamicArray

table = ChainedHashMap(10)
table.insert(1, "one")
table.insert(11, "eleven")
table.get(11)         # 'eleven'
11 in table, len(table)
print(table.render()) # one line per bucket, e.g. "Bucket1------><--->11,eleven<--->1,one"

arr = DynamicArray()
for value in (10, 20, 30):
    arr.append(value)
len(arr), arr.capacity()   # (3, 4)
arr.pop()                  # 30 (IndexError when empty)
```

### Order book

Each `Order` receives the next identifier when created. `orders` returns
buys by descending price and sells by ascending price, in arrival order
within a price level; `render` lays out both sides as text.

```python
from algokit.orderbook import Order, OrderBook, OrderType

book = OrderBook()
book.add_order(Order(OrderType.BUY, 100, 10))
book.add_order(Order(OrderType.SELL, 99, 5))
book.add_order(Order(OrderType.BUY, 105, 3))
[o.price for o in book.orders(OrderType.BUY)]   # [105, 100]
print(book.render())
```

## Commands

### `algokit-rides`

Runs the ride-booking simulation. Rides are submitted to a `ThreadPool`;
each ride waits for the nearest free driver, pays a fare of 300, sends a
notification in the background and releases the driver after the ride
time. After `--wait` seconds the total earnings so far are printed, and the
command then waits for every submitted ride to finish.

```
algokit-rides [--rides 8] [--workers 4] [--ride-time 5.0]
              [--payment-delay 1.0] [--notify-delay 0.1] [--wait 3.0]
```

### `algokit-tcp`

Exchanges a single message over TCP.

```
algokit-tcp server [--host HOST] [--port 8080] [--message REPLY]
algokit-tcp client [--host 127.0.0.1] [--port 8080] [--message TEXT]
```

The server listens on all interfaces by default, accepts one connection,
prints the client's message and sends back its reply (`Hello from server`
unless `--message` is given), then exits. The client sends its message
(`Hello Server, this is Client` by default) and prints the server's reply.
A connection error is printed to standard error and the command exits
with status 1.

## Limitations

- The TCP server handles exactly one client and one message, reading at
  most 1023 bytes; it is not a long-running server.
- `OrderBook` only stores and lists orders; it does not match buys
  against sells.
- `ChainedHashMap` has no removal and never resizes its buckets.
- There is no balanced search tree; `algokit.trees` covers plain binary
  trees filled in level order.