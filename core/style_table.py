"""
Style Table Module
Parses a stylesheet with tinycss2 and builds the selector -> declarations table.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import tinycss2

from .errors import StylesheetParseError, StylesheetReadError
from .models import ParsedRule, StyleTable
from utils.file_utils import read_file_content

logger = logging.getLogger(__name__)

# Descriptor blocks, never style rules (@keyframes is matched by suffix)
DECLARATION_AT_KEYWORDS = {'font-face', 'page'}


class StyleTableBuilder:
    def parse_css(self, css_content: str, source: Optional[str] = None) -> List[ParsedRule]:
        """
        Parse CSS text into a flat list of rules.

        Rules nested in block at-rules (@media, @supports, @starting-style, ...)
        and style rules nested in other style rules are returned depth-first
        in document order. @keyframes, @font-face and @page blocks are
        skipped. Declarations with parse errors are dropped. A parse error at
        stylesheet level raises StylesheetParseError.
        """
        stylesheet = tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True)
        for node in stylesheet:
            if node.type == 'error':
                raise StylesheetParseError(node.message, node.source_line, node.source_column, source)
        rules: List[ParsedRule] = []
        self._collect_rules(stylesheet, rules)
        return rules

    def _collect_rules(self, nodes: Iterable, rules: List[ParsedRule]) -> None:
        # Depth-first, parents before the rules nested in them
        for node in nodes:
            if node.type == 'qualified-rule':
                selectors = self.split_selectors(node.prelude)
                if not selectors:
                    logger.debug("Skipping rule without selector at line %s", node.source_line)
                    continue
                contents = self.parse_block(node.content)
                rules.append(ParsedRule(selectors=selectors, declarations=self.parse_declarations(contents)))
                self._collect_rules([n for n in contents if n.type != 'error'], rules)
            elif node.type == 'at-rule' and node.content is not None and not self._skips_at_rule(node):
                self._collect_rules(self.parse_block(node.content), rules)
            elif node.type == 'error':
                logger.debug("Skipping malformed rule at line %s: %s", node.source_line, node.message)

    def _skips_at_rule(self, node) -> bool:
        keyword = node.lower_at_keyword
        return keyword in DECLARATION_AT_KEYWORDS or keyword.endswith('keyframes')

    def parse_block(self, content) -> list:
        """Declarations, nested rules and errors of a {} block."""
        return tinycss2.parse_blocks_contents(content or [], skip_comments=True, skip_whitespace=True)

    def split_selectors(self, prelude) -> List[str]:
        """Split a rule prelude on top-level commas into trimmed selector fragments."""
        groups = [[]]
        for token in prelude:
            if token.type == 'literal' and token.value == ',':
                groups.append([])
            elif token.type != 'comment':
                groups[-1].append(token)
        fragments = [tinycss2.serialize(group).strip() for group in groups]
        return [fragment for fragment in fragments if fragment]

    def parse_declarations(self, contents: Iterable) -> List[tuple]:
        """Keep the (name, value) declarations of parsed block contents."""
        declarations = []
        for decl in contents:
            if decl.type != 'declaration':
                continue
            name = decl.name.strip()
            value = tinycss2.serialize(decl.value).strip()
            if not name or not value:
                logger.debug("Skipping empty declaration %r", name)
                continue
            declarations.append((name, value))
        return declarations

    def build_style_table(self, rules: Iterable[ParsedRule]) -> StyleTable:
        """
        Build the selector -> {property: value} table.

        Selector fragments of one rule are joined with ','. When two rules share
        the same joined selector, the later rule's values overwrite the earlier
        ones property by property.
        """
        table: StyleTable = {}
        for rule in rules:
            selector = ','.join(rule.selectors)
            declarations = table.setdefault(selector, {})
            for name, value in rule.declarations:
                if not name or not value:
                    continue
                declarations[name] = value
        return table

    def parse_style_table(self, css_content: str, source: Optional[str] = None) -> StyleTable:
        return self.build_style_table(self.parse_css(css_content, source=source))

    def load_style_table(self, path: Union[str, Path]) -> StyleTable:
        """Read a stylesheet file and build its style table."""
        try:
            css_content = read_file_content(Path(path))
        except (OSError, UnicodeDecodeError) as e:
            raise StylesheetReadError(str(path), str(e)) from e
        table = self.parse_style_table(css_content, source=str(path))
        logger.debug("Loaded %d selectors from %s", len(table), path)
        return table
