import pytest
from rich.segment import Segment
from rich.style import Style
from rich.table import Table
from rich.text import Text

from branchline import Markup, RichContent
from branchline.tree_components.content import to_content
from branchline.tree_components.segment import cell_len, cell_width


def plain(lines):
    return ["".join(segment.text for segment in line) for line in lines]


class TestMarkup:
    def test_plain_text_is_one_line(self):
        assert plain(Markup("hello").render_lines(80)) == ["hello"]

    def test_empty_text_yields_one_empty_line(self):
        assert Markup("").render_lines(80) == [[]]

    def test_explicit_newlines(self):
        assert plain(Markup("a\nb\n\nc").render_lines(80)) == ["a", "b", "", "c"]

    def test_tags_become_styles(self):
        lines = Markup("[bold]hi[/bold] there").render_lines(80)
        assert len(lines) == 1
        first, second = lines[0]
        assert first.text == "hi"
        assert first.style.bold is True
        assert second == Segment(" there", None)

    def test_nested_tags_combine(self):
        (line,) = Markup("[red]a[bold]b[/bold][/red]").render_lines(80)
        assert [segment.text for segment in line] == ["a", "b"]
        assert line[0].style == Style.parse("red")
        assert line[1].style.bold is True
        assert line[1].style.color.name == "red"

    def test_bare_close_tag_pops_latest(self):
        (line,) = Markup("[italic]a[/]b").render_lines(80)
        assert line[0].style.italic is True
        assert line[1].style is None

    def test_invalid_tag_is_kept_as_text(self):
        assert plain(Markup("items[x]").render_lines(80)) == ["items[x]"]

    def test_unmatched_close_tag_is_kept_as_text(self):
        assert plain(Markup("mount[/usr/local]").render_lines(80)) == ["mount[/usr/local]"]

    def test_close_tag_for_other_style_is_kept_as_text(self):
        (line,) = Markup("[bold]a[/italic]b[/bold]").render_lines(80)
        assert [segment.text for segment in line] == ["a[/italic]b"]
        assert line[0].style.bold is True

    def test_bare_close_tag_without_open_tag_is_kept_as_text(self):
        assert plain(Markup("a[/]b").render_lines(80)) == ["a[/]b"]

    def test_wraps_at_budget(self):
        assert plain(Markup("abcdefg").render_lines(3)) == ["abc", "def", "g"]

    def test_wrap_counts_wide_characters(self):
        assert plain(Markup("漢字漢").render_lines(4)) == ["漢字", "漢"]

    def test_style_survives_wrap(self):
        lines = Markup("[green]abcdef[/green]").render_lines(3)
        assert plain(lines) == ["abc", "def"]
        assert all(line[0].style == Style.parse("green") for line in lines)

    @pytest.mark.parametrize("budget", [0, -5])
    def test_degenerate_budget_disables_wrapping(self, budget):
        assert plain(Markup("abcdef").render_lines(budget)) == ["abcdef"]

    def test_base_style_applies_to_all_text(self):
        (line,) = Markup("hi", style="italic").render_lines(80)
        assert line[0].style.italic is True


class TestRichContent:
    def test_wraps_rich_text(self):
        lines = RichContent(Text("hello world")).render_lines(5)
        assert [text.rstrip() for text in plain(lines)] == ["hello", "world"]

    def test_ascii_only_switches_boxes_to_ascii(self):
        table = Table("metric", "value")
        table.add_row("p99", "182 ms")
        content = RichContent(table)
        assert not all(text.isascii() for text in plain(content.render_lines(40)))
        assert all(text.isascii() for text in plain(content.render_lines(40, ascii_only=True)))

    def test_negative_budget_is_clamped(self):
        lines = RichContent(Text("ab")).render_lines(-3)
        assert lines
        assert "".join(plain(lines)).replace(" ", "") == "ab"


class TestToContent:
    def test_string_becomes_markup(self):
        assert isinstance(to_content("label"), Markup)

    def test_render_lines_object_is_used_directly(self):
        content = Markup("x")
        assert to_content(content) is content

    def test_rich_renderable_is_wrapped(self):
        assert isinstance(to_content(Text("x")), RichContent)

    def test_unsupported_value_raises(self):
        with pytest.raises(TypeError):
            to_content(42)


class TestCellWidth:
    def test_ascii(self):
        assert cell_len("abc") == 3

    def test_wide_glyphs_take_two_cells(self):
        assert cell_len("漢字") == 4

    def test_box_drawing_is_single_cell(self):
        assert cell_len("├── ") == 4

    def test_segments(self):
        assert cell_width([Segment("ab"), Segment("漢"), Segment.line()]) == 4
