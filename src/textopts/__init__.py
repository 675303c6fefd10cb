"""Option store and tokenizer for space-delimited ``name=value`` strings."""

__version__ = "0.1.0"

from textopts.core.domain.option import Option
from textopts.core.repositories.option_store import OptionStore
from textopts.core.services.collection_expander import (
    CollectionExpander,
    expand_collection,
    expand_tree,
    split_collection,
)
from textopts.core.services.option_formatter import format_options, format_value
from textopts.core.services.option_tokenizer import OptionTokenizer
from textopts.options import (
    add_option,
    free_options,
    get_option,
    parse_options,
    remove_option,
)

__all__ = [
    "CollectionExpander",
    "Option",
    "OptionStore",
    "OptionTokenizer",
    "__version__",
    "add_option",
    "expand_collection",
    "expand_tree",
    "format_options",
    "format_value",
    "free_options",
    "get_option",
    "parse_options",
    "remove_option",
    "split_collection",
]
