from .batching import chunk_by_char_limit
from .sentences import last_sentence_break, split_sentences
from .text import is_blank, join_lines, split_lines

__all__ = [
    "chunk_by_char_limit",
    "last_sentence_break",
    "split_sentences",
    "is_blank",
    "join_lines",
    "split_lines",
]
