from .classifier import Classification, classify
from .formatter import format_notation
from .layout import IdGenerator, Placement, layout_node, layout_tree
from .nodes import ComponentNode, ParallelNode, SeriesNode, UnresolvedNode, count_leaves, iter_leaves
from .parser import NotationParser, parse_expression, parse_tokens
from .pipeline import parse_notation, parse_notation_with_warnings
from .settings import LayoutSettings, SettingsError, load_layout_settings, save_layout_settings
from .tokenizer import Token, TokenKind, tokenize

parse = parse_notation

__all__ = [
    'parse', 'parse_notation', 'parse_notation_with_warnings',
    'tokenize', 'Token', 'TokenKind',
    'classify', 'Classification',
    'NotationParser', 'parse_tokens', 'parse_expression',
    'ComponentNode', 'UnresolvedNode', 'SeriesNode', 'ParallelNode',
    'count_leaves', 'iter_leaves',
    'format_notation',
    'layout_node', 'layout_tree', 'IdGenerator', 'Placement',
    'LayoutSettings', 'SettingsError', 'load_layout_settings', 'save_layout_settings',
]
