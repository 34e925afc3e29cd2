# cmrender

`cmrender` works with CommonMark / GitHub-flavoured Markdown syntax trees.
You can build a tree from its node types, walk it, change it, and write it
back out as normalised CommonMark text. The package also has the HTML
escaping helpers, heading-anchor generator and entity decoder that a
Markdown renderer needs.

## Installation

```console
pip install cmrender
```

## What is in the package

- `cmrender.tree`: `Node`, a doubly linked tree node that holds a `data`
  payload. It has `parent`, `first_child`, `last_child`,
  `previous_sibling` and `next_sibling`. You change the tree with
  `append`, `prepend`, `insert_before`, `insert_after` and `detach`. You
  walk it with `children`, `reverse_children`, `ancestors`,
  `preceding_siblings`, `following_siblings`, `descendants`, `traverse`
  and `reverse_traverse`. The two traversals yield `NodeEdge` values,
  each with an `Edge.START` or `Edge.END` edge.
- `cmrender.nodes`: the node value dataclasses (`Document`, `Paragraph`,
  `Heading`, `Text`, `Strong`, `Emph`, `Link`, `Image`, `CodeBlock`,
  `ListInfo`, `Item`, `TaskItem`, `Table`, `TableRow`, `TableCell`,
  `FootnoteDefinition`, `FootnoteReference` and the rest). Also here are
  `Ast`, which pairs a value with a `Sourcepos`, and the helpers
  `new_node`, `is_block` and `containing_block`.
- `cmrender.options`: `Options`, made of `ExtensionOptions` and
  `RenderOptions`. `ListStyleType` picks the bullet character.
  `RenderOptions.width` sets the wrap width, and 0 turns wrapping off.
  `Plugins` and `RenderPlugins` hold optional adapter objects.
- `cmrender.commonmark`: `format_commonmark(root, options=None,
  plugins=None)` writes a tree as CommonMark text. `is_autolink` tells
  whether a link can be written as `<url>`. The `plugins` argument is
  accepted but not used.
- `cmrender.cmwriter`: `CommonMarkWriter`, the text sink that the
  CommonMark output is built on. It handles line prefixes, pending line
  breaks, `Escaping` modes and wrapping. Two run-length helpers go with
  it: `longest_char_sequence` and `shortest_unused_sequence`.
- `cmrender.escaping`: the HTML helpers `escape`, `escape_href`,
  `write_opening_tag`, `tagfilter`, `tagfilter_block` and
  `dangerous_url`.
- `cmrender.anchors`: `Anchorizer`, which makes heading anchors that are
  unique within a document.
- `cmrender.entity`: HTML character-reference decoding with `unescape` and
  `unescape_html`.
- `cmrender.ctype`: ASCII byte-class predicates (`isspace`, `ispunct`,
  `isdigit`, `isalpha`, `isalnum`).

## Writing a tree as CommonMark

```python
from cmrender.commonmark import format_commonmark
from cmrender.nodes import Document, Paragraph, Strong, Text, new_node

root = new_node(Document())
para = new_node(Paragraph())
root.append(para)
para.append(new_node(Text("Hello, ")))
strong = new_node(Strong())
para.append(strong)
strong.append(new_node(Text("world")))

format_commonmark(root)  # "Hello, **world**\n"
```

## Heading anchors

`Anchorizer` remembers every anchor it has handed out, so the same anchor
is never given twice. Use a new anchorizer for each document.

```python
from cmrender.anchors import Anchorizer

anchorizer = Anchorizer()
anchorizer.anchorize("Stuff")            # "stuff"
anchorizer.anchorize("Stuff")            # "stuff-1"
anchorizer.anchorize("Ticks aren't in")  # "ticks-arent-in"
```

## Escaping and entities

```python
from cmrender.escaping import escape, escape_href
from cmrender.entity import unescape_html

escape('<a href="x">&</a>')  # '&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;'
escape_href("a b")           # 'a%20b'
unescape_html("&amp; &#65;") # '& A'
```

`escape` is meant for free text. Use `escape_href` for URLs that go into
attributes. It leaves URL-safe characters unchanged, including `%`, and
percent-encodes everything else byte by byte.

## What the package does not do

- It does not parse Markdown text. You build trees yourself from the
  types in `cmrender.nodes`.
- It does not render a whole tree as HTML. It has the HTML escaping, tag
  filtering and anchor helpers, but no HTML document writer and no
  syntax-highlighting or heading adapters.
- There is no command-line program.

## Running the tests

```console
pip install -e ".[test]"
pytest
```