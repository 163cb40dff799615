import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.errors import StylesheetParseError, StylesheetReadError
from core.models import ParsedRule
from core.style_table import StyleTableBuilder

def test_selector_and_property_extraction():
    builder = StyleTableBuilder()
    table = builder.parse_style_table(".foo { color: #fff; margin: 0; } .bar { padding: 1rem; }")
    assert table == {'.foo': {'color': '#fff', 'margin': '0'}, '.bar': {'padding': '1rem'}}

def test_selector_list_is_comma_joined():
    builder = StyleTableBuilder()
    rules = builder.parse_css(".a, .b > .c { color: red; }")
    assert rules[0].selectors == ['.a', '.b > .c']
    table = builder.build_style_table(rules)
    assert list(table) == ['.a,.b > .c']

def test_commas_inside_functions_do_not_split():
    builder = StyleTableBuilder()
    table = builder.parse_style_table(".x:not(.a, .b) { color: red; }")
    assert list(table) == ['.x:not(.a, .b)']

def test_same_selector_later_values_win():
    builder = StyleTableBuilder()
    table = builder.parse_style_table(".a { color: red; margin: 0; } .a { color: blue; }")
    assert table == {'.a': {'color': 'blue', 'margin': '0'}}

def test_build_style_table_from_parsed_rules():
    builder = StyleTableBuilder()
    rules = [
        ParsedRule(['.a', '.b'], [('color', 'red'), ('', 'x'), ('margin', '')]),
        ParsedRule(['.a', '.b'], [('color', 'green')]),
    ]
    assert builder.build_style_table(rules) == {'.a,.b': {'color': 'green'}}

def test_rules_inside_media_and_supports():
    builder = StyleTableBuilder()
    css = """
    @media (min-width: 600px) { .foo { color: red; } }
    @supports (display: grid) { @media print { .bar { display: grid; } } }
    @font-face { font-family: x; }
    @keyframes spin { from { opacity: 0; } to { opacity: 1; } }
    """
    table = builder.parse_style_table(css)
    assert table == {'.foo': {'color': 'red'}, '.bar': {'display': 'grid'}}

def test_malformed_declarations_are_skipped():
    builder = StyleTableBuilder()
    table = builder.parse_style_table(".a { color: red; ; margin; padding: 1px; width: ; }")
    assert table == {'.a': {'color': 'red', 'padding': '1px'}}

def test_important_is_not_part_of_value():
    builder = StyleTableBuilder()
    table = builder.parse_style_table(".a { color: red !important; }")
    assert table['.a']['color'] == 'red'

def test_comments_and_whitespace_variations():
    builder = StyleTableBuilder()
    assert builder.parse_style_table(".a /* note */ { color: red; }") == \
        builder.parse_style_table(".a{color:red}")

def test_rule_without_declarations_is_kept_empty():
    builder = StyleTableBuilder()
    assert builder.parse_style_table(".a { }") == {'.a': {}}

def test_empty_stylesheet():
    builder = StyleTableBuilder()
    assert builder.parse_style_table("") == {}

def test_truncated_stylesheet_is_fatal():
    builder = StyleTableBuilder()
    with pytest.raises(StylesheetParseError) as excinfo:
        builder.parse_style_table(".a { color: red; } .b", source="b.css")
    assert excinfo.value.line == 1
    assert 'b.css' in str(excinfo.value)

def test_load_style_table(tmp_path):
    path = tmp_path / 'a.css'
    path.write_text(".a { color: red; }", encoding='utf-8')
    assert StyleTableBuilder().load_style_table(path) == {'.a': {'color': 'red'}}

def test_load_missing_file():
    with pytest.raises(StylesheetReadError):
        StyleTableBuilder().load_style_table('/nonexistent/style.css')

def test_rules_inside_any_block_at_rule():
    builder = StyleTableBuilder()
    name = 'x' * 20
    css = f"""
    @starting-style {{ .{name} {{ opacity: 0; }} }}
    @-moz-document url-prefix() {{ .moz {{ color: red; }} }}
    """
    table = builder.parse_style_table(css)
    assert table == {f'.{name}': {'opacity': '0'}, '.moz': {'color': 'red'}}

def test_nested_style_rules():
    builder = StyleTableBuilder()
    name = 'x' * 20
    table = builder.parse_style_table(f".p {{ color: red; .{name} {{ color: blue; }} &:hover {{ color: green; }} }}")
    assert table == {
        '.p': {'color': 'red'},
        f'.{name}': {'color': 'blue'},
        '&:hover': {'color': 'green'},
    }
    assert list(table) == ['.p', f'.{name}', '&:hover']

def test_vendor_keyframes_are_skipped():
    builder = StyleTableBuilder()
    table = builder.parse_style_table("@-webkit-keyframes spin { 0% { opacity: 0; } } .a { color: red; }")
    assert table == {'.a': {'color': 'red'}}

def test_string_values_keep_their_quotes():
    builder = StyleTableBuilder()
    table = builder.parse_style_table(".a { content: 'ab'; font-family: \"Helvetica Neue\"; }")
    assert table['.a'] == {'content': "'ab'", 'font-family': '"Helvetica Neue"'}

def test_undecodable_file_is_fatal(tmp_path):
    path = tmp_path / 'latin1.css'
    path.write_bytes(b'.a { content: "\xe9"; }')
    with pytest.raises(StylesheetReadError):
        StyleTableBuilder().load_style_table(path)
