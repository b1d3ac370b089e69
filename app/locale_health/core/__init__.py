"""Cross-referencing engine: indexing, usage extraction, resolution, reconciliation."""

from .key_paths import (
    get_value_at_key_path,
    index_key_paths,
    join_key_path,
    split_key_path,
    walk_leaves,
)
from .reconciliation import ReconciliationEngine
from .resolver import PackageResolver, locale_from_path
from .usage import (
    RegexUsageExtractor,
    UsageExtractor,
    collect_source_corpus,
    is_auto_translate_label,
    iter_config_usages,
    iter_context_menu_usages,
    iter_menu_usages,
    key_path_from_label,
)

__all__ = [
    "get_value_at_key_path",
    "index_key_paths",
    "join_key_path",
    "split_key_path",
    "walk_leaves",
    "ReconciliationEngine",
    "PackageResolver",
    "locale_from_path",
    "RegexUsageExtractor",
    "UsageExtractor",
    "collect_source_corpus",
    "is_auto_translate_label",
    "iter_config_usages",
    "iter_context_menu_usages",
    "iter_menu_usages",
    "key_path_from_label",
]
