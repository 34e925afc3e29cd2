import pytest

from cmrender.nodes import (
    Ast,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emph,
    Heading,
    Item,
    LineColumn,
    Link,
    ListInfo,
    ListType,
    Paragraph,
    SoftBreak,
    Sourcepos,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    Text,
    containing_block,
    is_block,
    new_node,
)


def test_sourcepos_display():
    assert str(Sourcepos.of(1, 1, 2, 5)) == "1:1-2:5"


def test_sourcepos_of_matches_explicit_construction():
    assert Sourcepos.of(3, 4, 5, 6) == Sourcepos(LineColumn(3, 4), LineColumn(5, 6))


def test_default_sourcepos_is_zero():
    pos = Sourcepos()
    assert pos.start.line == 0 and pos.end.column == 0


@pytest.mark.parametrize(
    "value",
    [Document(), BlockQuote(), ListInfo(), Item(), Heading(), CodeBlock(), Paragraph(),
     Table(), TableRow(), TableCell(), TaskItem()],
)
def test_block_values(value):
    assert is_block(value) is True


@pytest.mark.parametrize(
    "value", [Text("x"), Code("x"), SoftBreak(), Strong(), Emph(), Link("u", "")]
)
def test_inline_values(value):
    assert is_block(value) is False


def test_new_node_wraps_value():
    pos = Sourcepos.of(1, 2, 3, 4)
    node = new_node(Text("hello"), pos)
    assert node.data == Ast(Text("hello"), pos)
    assert node.parent is None


def test_new_node_default_sourcepos():
    node = new_node(Paragraph())
    assert node.data.sourcepos == Sourcepos()


def test_containing_block_of_inline_is_parent_block():
    doc = new_node(Document())
    para = new_node(Paragraph())
    emph = new_node(Emph())
    text = new_node(Text("a"))
    doc.append(para)
    para.append(emph)
    emph.append(text)
    assert containing_block(text) is para


def test_containing_block_of_block_is_itself():
    doc = new_node(Document())
    para = new_node(Paragraph())
    doc.append(para)
    assert containing_block(para) is para


def test_containing_block_none_for_detached_inline():
    assert containing_block(new_node(Text("x"))) is None


def test_list_defaults():
    info = ListInfo()
    assert info.list_type is ListType.BULLET
    assert info.start == 1
    assert info.tight is False


def test_marker_values_compare_equal():
    assert Strong() == Strong()
    assert Text("a") != Text("b")


def test_text_literal_is_mutable():
    node = new_node(Text("This is my input."))
    node.data.value.literal = node.data.value.literal.replace("my", "your")
    assert node.data.value.literal == "This is your input."


def test_table_alignments_independent():
    first, second = Table(), Table()
    first.alignments.append("x")
    assert second.alignments == []