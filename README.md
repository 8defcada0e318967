# socialxml

Utilities for XML documents that describe a small social network of users,
their posts and their followers. Only the standard library is needed.

## Modules

- **`socialxml.error_detect`**: tag checking and repair.
  - `tokenize_text(text)` splits text into its tags and drops the text
    between them. `tokenize_file(path)` does the same for a file, after it
    removes the line breaks. `read_file(path)` returns a file's content.
  - `is_well_formed(tokens)` tells whether every opening tag is closed in
    the right order.
  - `detect_errors(tokens)` returns a list of `TagError` records. Each
    record has an `ErrorType`: a closing tag with no opening tag, or an
    opening tag with no closing tag.
  - `locate_error(error, text)` sets the error's `line_number` and `offset`.
  - `correct_error(current, text, errors)` inserts the missing tag for one
    located error. It also moves the offsets of the other errors on the same
    line.
- **`socialxml.xml_to_json`**: `xml_to_json(xml_text)` gives indented JSON
  text and `xml_to_json_minified(xml_text)` gives compact JSON text.
  Elements with the same name next to each other become JSON arrays. Empty
  input gives an empty string. `pretty_json(json_text)` indents JSON text
  that has one item per line, four spaces for each line that ends in an
  open bracket.
- **`socialxml.social`**: the `Post` (body, topics) and `User` (id, name,
  posts, follower ids) dataclasses. `search_posts(word, topic, posts)`
  returns the posts whose body contains `word`, or that have a topic equal
  to `word` or `topic`. Case is ignored.
- **`socialxml.graph`**: `Graph(vertex_ids)` holds a follower list for each
  user. It has `add_edge`, `set_adjacency`, `neighbours`,
  `most_influential_user`, `most_active_user`, `mutual_followers` and
  `suggest_users_to_follow`. `str(graph)` gives a text listing of the
  graph. An unknown vertex id raises `KeyError`.
- **`socialxml.search`**: `PostSearch(users)` indexes posts by topic
  (`TopicDetails`) and by post (`PostDetails`). It gives completion
  candidates, matches text against topic names or post bodies with case
  ignored, and `render(text, mode)` returns numbered HTML blocks with the
  number of matches. `SearchMode` chooses between `TOPICS` and `POSTS`.
- **`socialxml.huffman`**: `HuffmanTreeNode`, a tree node that sorts by
  frequency so that a heap gives the rarest node first.

## Installation

```
pip install .
```

## Command line

```
socialxml-check document.xml
```

With no argument, the command reads `file.txt`. It prints the tags it
found and says whether they match. For each error it prints the error
type, line, offset, tag length, tag name and tag index. Last, it prints the
document with the missing tags added.

## Library use

```python
from socialxml.error_detect import tokenize_text, is_well_formed, detect_errors
from socialxml.graph import Graph
from socialxml.xml_to_json import xml_to_json_minified

tokens = tokenize_text("<users><user><id>1</id></user></users>")
assert is_well_formed(tokens)
errors = detect_errors(tokens)  # empty: the tags match

graph = Graph(["1", "2", "3"])
graph.set_adjacency("1", ["2", "3"])
graph.set_adjacency("2", ["3"])
print(graph.most_influential_user())  # "3"
print(graph.most_active_user())       # "1"

print(xml_to_json_minified("<users><user><id>1</id></user></users>"))
```

## What the package does not do

- It has no reader that turns a users document into `User` and `Post`
  objects. You build these objects yourself before you pass them to
  `Graph`, `search_posts` or `PostSearch`.
- It has no graphical interface. `PostSearch.render` returns HTML text,
  and you show it in your own application.
- `socialxml.huffman` has only the tree node. It has no Huffman encoder or
  decoder and does no compression.

## Tests

```
pip install ".[test]"
pytest
```