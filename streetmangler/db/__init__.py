"""Name dictionary: indices and the four checks run against them."""

from streetmangler.db.database import Database, DatabaseBuilder
from streetmangler.db.spelltrie import SpellTrie

__all__ = ["Database", "DatabaseBuilder", "SpellTrie"]
