#!/usr/bin/env python3
"""
Render Engine command line.

Resolves the style of every element of an HTML page and prints it.
"""

import argparse
import logging
import sys
from typing import List, Optional

from render_engine.css import Stylesheet, Viewport, load_rules
from render_engine.dom import Document, NodeType
from render_engine.font import FontManager
from render_engine.utils.config import Config
from render_engine.utils.logging import get_default_log_file, log_exception, setup_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Resolve computed styles for an HTML document")
    parser.add_argument('html', help='HTML file to resolve')
    parser.add_argument('--css', action='append', default=[], help='Author stylesheet (repeatable)')
    parser.add_argument('--width', type=float, default=None, help='Viewport width in pixels')
    parser.add_argument('--height', type=float, default=None, help='Viewport height in pixels')
    parser.add_argument('--config', type=str, default=None, help='Configuration file')
    parser.add_argument('--measure', action='store_true', help='Also print measured text widths')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def format_style(style) -> str:
    """Render a style as 'key: value; ...' sorted by property name."""
    return "; ".join(f"{key}: {value}" for key, value in sorted(style.items()))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_arguments(argv)

    config = Config(args.config)
    console_level = "DEBUG" if args.debug else config.get('logging.console_level', 'INFO')
    log_file = get_default_log_file() if config.get('logging.log_to_file', False) else None
    setup_logging(log_file=log_file, console_level=console_level,
                  file_level=config.get('logging.file_level', 'DEBUG'))

    viewport = config.default_viewport()
    viewport = Viewport(args.width if args.width is not None else viewport.width,
                        args.height if args.height is not None else viewport.height)

    try:
        with open(args.html, 'r', encoding='utf-8') as f:
            html_content = f.read()
        css_sources = []
        for path in args.css:
            with open(path, 'r', encoding='utf-8') as f:
                css_sources.append(f.read())
    except OSError as e:
        log_exception(logger, e, "Error reading input")
        return 1

    document = Document()
    if not document.parse_html(html_content):
        logger.error(f"Failed to parse {args.html}")
        return 1

    stylesheet = Stylesheet(viewport)
    # Embedded <style> blocks come first, then files in command line order
    for css_text in document.style_texts + css_sources:
        load_rules(css_text, stylesheet)

    logger.info(f"Resolving {args.html} at {viewport!r} ({viewport.breakpoint().value})")
    styles = stylesheet.compute_all_styles(document)
    fonts = FontManager.from_config(config) if args.measure else None

    for node in document.iter_nodes():
        style = styles.get(node.node_id)
        if style is None:
            continue
        depth = len(node.ancestors()) - 1
        indent = "  " * max(depth, 0)
        if node.node_type == NodeType.ELEMENT_NODE:
            print(f"{indent}<{node.tag_name}> {format_style(style)}")
        elif node.node_type == NodeType.TEXT_NODE and fonts is not None:
            width = fonts.measure_text(node.data.strip(), style.font_family, style.font_size,
                                       style.is_bold, style.is_italic)
            print(f"{indent}#text width={width:.1f}px")

    return 0


if __name__ == "__main__":
    sys.exit(main())
