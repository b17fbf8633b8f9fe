# permissive-search

Build search bars that forgive the user. `permissive_search` matches typed
input against a set of keys. It tolerates neighbouring-key misclicks on a
QWERTY keyboard. It also matches letters typed without their diacritics, and
kana typed in the other script.

## Installation

```
pip install permissive-search
```

## Library usage

A `SearchTree` stores keys as a prefix tree. Each key maps to an integer
index, which is usually the key's position in your own list:

```python
from permissive_search.tree import SearchTree, Searcher
from permissive_search.lookalikes import all_lookalikes

words = ["café", "cafeteria", "banana", "bandana"]
tree = SearchTree.from_items(enumerate(words))

searcher = Searcher(tree, all_lookalikes)
searcher.extend("cafe")
print([words[i] for i in searcher.candidates()])
# ['cafeteria', 'café']

searcher.pop()
print(searcher.input)
# caf
```

### `SearchTree`

- `SearchTree.from_items(items)` builds a tree from `(index, key)` pairs.
- `push(key, index)` adds a key. If the key is already present, its index is
  replaced.
- `get(ch)` returns the child node for a character, or `None` if there is no
  such child.
- `indices()` yields the indices of all keys reachable from a node. A node's
  own index comes first, and its children follow in character order.

### `Searcher`

A `Searcher` holds the state of a search while the user types:

- `push(ch)` appends one character. It raises `ValueError` if `ch` is not
  exactly one character long.
- `extend(chars)` appends several characters.
- `pop()` removes the last character, as a backspace does. It does nothing
  when the input is empty.
- `candidates()` yields the index of every key that the current input could
  refer to.
- `input` holds the text typed so far, and `root` holds the tree being
  searched. Both are read-only properties.

A typed character that matches nothing is kept in `input`, but it does not
narrow the results.

### Lookalike functions

The second argument to `Searcher` is a callable. It returns the characters
that count as similar to a typed character, in addition to the character
itself. `permissive_search.lookalikes` provides three such functions:

- `qwerty_misclicks(ch)` yields the same key with Shift toggled, then the
  unshifted keys around it, then the shifted keys around it. It covers
  printable ASCII characters on the QWERTY layout.
- `variants(ch)` yields accented forms of Latin letters and some Cyrillic and
  Greek variants. For kana, it yields the form in the other script, the small
  forms, and the forms with dakuten and handakuten.
- `all_lookalikes(ch)` yields the output of both.

You can use any callable that takes a character and returns an iterable of
characters instead.

## Command-line demo

The `permissive-search` command opens an interactive search over the lines of
a UTF-8 text file:

```
permissive-search notes.txt
```

Type to narrow the list. The first ten matching lines appear below the
prompt. Backspace deletes a character, and Esc or Ctrl+C quits. The command
exits with status 1 and prints a message if no file is given or the file
cannot be read.

The same entry point is `permissive_search.cli.main(argv=None)`. The helper
`permissive_search.cli.read_lines(path)` returns the lines of a file without
their line endings.

## Running the tests

```
pip install permissive-search[test]
pytest
```