import logging
from typing import FrozenSet, List, Optional

from ..models import ColumnSchema, TableSchema, TargetLanguage
from ..type_mapper import TypeMapper, get_type_mapper

logger = logging.getLogger(__name__)


class BaseEmitter:
    """
    A base class for all code emitters to ensure a consistent interface.

    Emitters are stateless: one instance may render any number of tables,
    from any number of threads.
    """
    language: TargetLanguage = None
    reserved_words: FrozenSet[str] = frozenset()

    def __init__(self, type_mapper: Optional[TypeMapper] = None):
        self.type_mapper = type_mapper or get_type_mapper()

    def warn_unusable_names(self, table: TableSchema) -> None:
        """Log names that are emitted as-is but are not identifiers in the target language."""
        for name in [table.name] + [c.name for c in table.columns]:
            if not name.isidentifier() or name in self.reserved_words:
                logger.warning(
                    f"'{name}' in table '{table.name}' is not a valid {self.language.value} identifier; "
                    f"the generated code will not compile"
                )

    def field_type(self, column: ColumnSchema) -> str:
        return self.type_mapper.map_type(column.sql_type, column.nullable, self.language)

    def base_types(self, table: TableSchema) -> List[str]:
        return [self.type_mapper.base_type(c.sql_type, self.language) for c in table.columns]

    def emit(self, table: TableSchema) -> str:
        """
        The main rendering method that each emitter must implement.

        Args:
            table (TableSchema): The table to render as a data object.

        Returns:
            The source text of one data object, newline-terminated.
        """
        raise NotImplementedError("Each emitter must implement its own emit method.")
