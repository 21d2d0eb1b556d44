import pytest

from render_engine.css import (
    Breakpoint, BreakpointIs, MaxWidth, MinWidth, Rule, Selector, Style, Stylesheet, Viewport,
    user_agent_defaults,
)
from render_engine.dom import Document, Element

from .conftest import append


def test_user_agent_defaults_only(document, stylesheet):
    paragraph = append(document, document.body, "p")

    style = stylesheet.compute_style(document, paragraph.node_id)

    assert style["margin"] == "0.3em 0.5em"
    assert "font-family" not in style
    assert style.font_family == "Times New Roman"


def test_body_default_margin(document, stylesheet):
    style = stylesheet.compute_style(document, document.body.node_id)
    assert style == {"margin": "8px"}


def test_unknown_tag_has_no_defaults(document, stylesheet):
    div = append(document, document.body, "div")
    assert stylesheet.compute_style(document, div.node_id) == {}
    assert user_agent_defaults("div") == []


def test_inheritable_properties_propagate_to_descendants(document, stylesheet):
    outer = append(document, document.body, "div", class_="outer")
    middle = append(document, outer, "section")
    inner = append(document, middle, "span")
    stylesheet.add_rule(Selector.class_("outer"), {"color": "#336699", "margin": "4px", "text-align": "center"})

    style = stylesheet.compute_style(document, inner.node_id)

    assert style["color"] == "#336699"
    assert style["text-align"] == "center"
    assert "margin" not in style


def test_child_does_not_inherit_margin(document, stylesheet):
    child = append(document, document.body, "span")
    stylesheet.add_rule(Selector.tag("body"), {"margin": "20px", "font-size": "20px"})

    style = stylesheet.compute_style(document, child.node_id)

    assert style == {"font-size": "20px"}


def test_author_rule_overrides_user_agent_default(document, stylesheet):
    heading = append(document, document.body, "h1")
    stylesheet.add_rule(Selector.tag("h1"), {"margin": "0"})

    style = stylesheet.compute_style(document, heading.node_id)

    assert style["margin"] == "0"
    assert style["font-size"] == "2em"
    assert style.is_bold


@pytest.mark.parametrize("media_first", [True, False])
def test_active_media_rule_wins_regardless_of_registration_order(document, media_first):
    heading = append(document, document.body, "h1")
    stylesheet = Stylesheet()

    def add_media():
        stylesheet.add_media_rule(MinWidth(1000), [Rule(Selector.tag("h1"), {"margin": "1em"})])

    if media_first:
        add_media()
    stylesheet.add_rule(Selector.tag("h1"), {"margin": "0"})
    if not media_first:
        add_media()

    assert stylesheet.compute_style(document, heading.node_id)["margin"] == "1em"


def test_inactive_media_rule_is_skipped(document, stylesheet):
    heading = append(document, document.body, "h1")
    stylesheet.add_rule(Selector.tag("h1"), {"margin": "0"})
    stylesheet.add_media_rule(MaxWidth(600), [Rule(Selector.tag("h1"), {"margin": "1em"})])

    assert stylesheet.compute_style(document, heading.node_id)["margin"] == "0"
    mobile = stylesheet.compute_style_with_viewport(document, heading.node_id, Viewport(400, 800))
    assert mobile["margin"] == "1em"


def test_later_rules_win_and_merge_per_property(document, stylesheet):
    paragraph = append(document, document.body, "p", id="intro", class_="lead")
    stylesheet.add_rule(Selector.id("intro"), {"color": "#ff0000", "font-size": "20px"})
    stylesheet.add_rule(Selector.class_("lead"), {"color": "#00ff00"})
    stylesheet.add_rule(Selector.tag("p"), {"line-height": "1.5"})

    style = stylesheet.compute_style(document, paragraph.node_id)

    # No specificity: the tag rule registered last does not lose to the id rule
    assert style["color"] == "#00ff00"
    assert style["font-size"] == "20px"
    assert style["line-height"] == "1.5"
    assert style["margin"] == "0.3em 0.5em"


def test_media_blocks_apply_in_order(document, stylesheet):
    div = append(document, document.body, "div")
    stylesheet.add_media_rule(BreakpointIs(Breakpoint.TABLET), [
        Rule(Selector.any(), {"width": "50%"}),
        Rule(Selector.tag("div"), {"width": "75%"}),
    ])
    stylesheet.add_media_rule(MinWidth(900), [Rule(Selector.tag("div"), {"width": "90%"})])

    assert stylesheet.compute_style_with_viewport(document, div.node_id, Viewport(800, 600))["width"] == "75%"
    assert stylesheet.compute_style_with_viewport(document, div.node_id, Viewport(950, 600))["width"] == "90%"
    assert "width" not in stylesheet.compute_style_with_viewport(document, div.node_id, Viewport(500, 600))


def test_set_viewport_changes_default_queries(document, stylesheet):
    div = append(document, document.body, "div")
    stylesheet.add_media_rule(MaxWidth(767), [Rule(Selector.tag("div"), {"display": "none"})])

    assert "display" not in stylesheet.compute_style(document, div.node_id)
    stylesheet.set_viewport(Viewport(375, 667))
    assert stylesheet.viewport == Viewport(375, 667)
    assert stylesheet.compute_style(document, div.node_id)["display"] == "none"


def test_text_node_copies_full_parent_style(document, stylesheet):
    paragraph = append(document, document.body, "p")
    text = document.create_text_node("hello")
    paragraph.append_child(text)
    stylesheet.add_rule(Selector.tag("p"), {"color": "#123456", "padding": "2px"})

    parent_style = stylesheet.compute_style(document, paragraph.node_id)
    text_style = stylesheet.compute_style(document, text.node_id)

    assert text_style == parent_style
    assert text_style["margin"] == "0.3em 0.5em"
    assert text_style["padding"] == "2px"


def test_detached_text_node_has_empty_style(document, stylesheet):
    text = document.create_text_node("orphan")
    assert stylesheet.compute_style(document, text.node_id) == {}


def test_comment_and_document_nodes_have_empty_style(document, stylesheet):
    comment = document.create_comment("note")
    document.body.append_child(comment)
    stylesheet.add_rule(Selector.any(), {"color": "#fff"})

    assert stylesheet.compute_style(document, comment.node_id) == {}
    assert stylesheet.compute_style(document, document.node_id) == {}


def test_each_query_returns_an_independent_style(document, stylesheet):
    paragraph = append(document, document.body, "p")
    stylesheet.add_rule(Selector.tag("p"), Style({"color": "#000"}))

    first = stylesheet.compute_style(document, paragraph.node_id)
    first["color"] = "#fff"
    second = stylesheet.compute_style(document, paragraph.node_id)

    assert second["color"] == "#000"
    assert stylesheet.rules[0].declarations["color"] == "#000"


def test_unknown_node_id_raises(document, stylesheet):
    with pytest.raises(KeyError):
        stylesheet.compute_style(document, 9999)


def test_compute_all_styles_matches_per_node_resolution():
    document = Document()
    document.parse_html(
        "<html><body class='page'>"
        "<h1 id='title'>Title</h1>"
        "<ul><li>One <a href='#'>link</a></li><li class='last'>Two</li></ul>"
        "<blockquote><p>Quote <em>this</em></p></blockquote>"
        "</body></html>"
    )
    stylesheet = Stylesheet(Viewport(800, 600))
    stylesheet.add_rule(Selector.class_("page"), {"font-family": "Georgia", "color": "#222"})
    stylesheet.add_rule(Selector.id("title"), {"margin": "0 auto"})
    stylesheet.add_media_rule(BreakpointIs(Breakpoint.TABLET), [Rule(Selector.class_("last"), {"font-weight": "700"})])

    all_styles = stylesheet.compute_all_styles(document)

    assert set(all_styles) == {node.node_id for node in document.iter_nodes()}
    for node in document.iter_nodes():
        assert all_styles[node.node_id] == stylesheet.compute_style(document, node.node_id)

    link = document.get_elements_by_tag_name("a")[0]
    link_style = all_styles[link.node_id]
    assert link_style.color == (0, 0, 255)
    assert link_style.font_family == "Georgia"
    assert link_style.has_text_decoration("underline")
    last = document.get_elements_by_tag_name("li")[1]
    assert all_styles[last.node_id].is_bold


def test_compute_all_styles_results_are_independent(document, stylesheet):
    paragraph = append(document, document.body, "p")
    text = document.create_text_node("x")
    paragraph.append_child(text)

    styles = stylesheet.compute_all_styles(document, Viewport(320, 480))
    styles[paragraph.node_id]["margin"] = "0"

    assert styles[text.node_id]["margin"] == "0.3em 0.5em"


def test_deep_tree_resolves_without_recursion_limit(stylesheet):
    document = Document()
    parent = document.body
    stylesheet.add_rule(Selector.tag("body"), {"color": "#abcdef"})
    for _ in range(3000):
        parent = append(document, parent, "div")

    assert stylesheet.compute_style(document, parent.node_id).color == (0xab, 0xcd, 0xef)


def test_from_css_builds_rules():
    stylesheet = Stylesheet.from_css("p { margin: 2px } @media screen and (max-width: 600px) { p { margin: 1px } }")
    assert len(stylesheet.rules) == 1
    assert len(stylesheet.media_rules) == 1


def test_compute_all_styles_skips_unregistered_nodes(document, stylesheet):
    registered = append(document, document.body, "p")
    document.body.append_child(Element("p"))

    styles = stylesheet.compute_all_styles(document)

    assert None not in styles
    assert styles[registered.node_id]["margin"] == "0.3em 0.5em"
