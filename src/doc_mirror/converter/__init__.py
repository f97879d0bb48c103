"""
Converter Package

Text transformations applied to every mirrored document before it is
written into the site.

Usage:
    from doc_mirror.converter import neutralize_markup, rewrite_cross_links

    body = neutralize_markup(markdown_text)
    body = rewrite_cross_links(body, manifest)
"""

from doc_mirror.converter.markup import FenceState, neutralize_markup
from doc_mirror.converter.links import build_link_lookup, rewrite_cross_links

__all__ = ['FenceState', 'neutralize_markup', 'build_link_lookup', 'rewrite_cross_links']
