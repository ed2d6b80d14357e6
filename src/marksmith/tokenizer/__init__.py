"""Block tokenizer.

Each block type has its own recognizer module; ``core`` tries them in
priority order.
"""

from marksmith.tokenizer.code import parse_fenced_code, parse_indented_code
from marksmith.tokenizer.core import recognizers, tokenize, tokenize_lines
from marksmith.tokenizer.definition_list import parse_definition_list
from marksmith.tokenizer.definitions import extract_definitions
from marksmith.tokenizer.headings import parse_atx_heading, parse_setext_heading
from marksmith.tokenizer.lines import get_indent, parse_pipe_row
from marksmith.tokenizer.lists import parse_list
from marksmith.tokenizer.paragraph import parse_paragraph
from marksmith.tokenizer.quotes import parse_blockquote, parse_horizontal_rule
from marksmith.tokenizer.structured_data import parse_json_block, parse_yaml_block
from marksmith.tokenizer.table import parse_alignments, parse_table

__all__ = [
    "extract_definitions",
    "get_indent",
    "parse_alignments",
    "parse_atx_heading",
    "parse_blockquote",
    "parse_definition_list",
    "parse_fenced_code",
    "parse_horizontal_rule",
    "parse_indented_code",
    "parse_json_block",
    "parse_list",
    "parse_paragraph",
    "parse_pipe_row",
    "parse_setext_heading",
    "parse_table",
    "parse_yaml_block",
    "recognizers",
    "tokenize",
    "tokenize_lines",
]
