import keyword
from collections import defaultdict

from ..models import TableSchema, TargetLanguage
from .base_emitter import BaseEmitter


class PythonEmitter(BaseEmitter):
    """``@dataclass`` with one annotated field per column.

    Only the imports the fields actually use are written.
    """
    language = TargetLanguage.PYTHON
    reserved_words = frozenset(keyword.kwlist)

    def _import_lines(self, table: TableSchema) -> list:
        needed = set(self.base_types(table))
        requirement = self.type_mapper.nullable_requirement(self.language)
        if requirement and any(c.nullable for c in table.columns):
            needed.add(requirement)

        by_module = defaultdict(set)
        for name, module in self.type_mapper.import_table(self.language).items():
            if name in needed:
                by_module[module].add(name)

        lines = ["from dataclasses import dataclass"]
        for module in sorted(by_module):
            lines.append(f"from {module} import {', '.join(sorted(by_module[module]))}")
        return lines

    def emit(self, table: TableSchema) -> str:
        self.warn_unusable_names(table)
        lines = self._import_lines(table)
        lines.extend(["", "", "@dataclass", f"class {table.name}:"])
        if not table.columns:
            lines.append("    pass")
        for column in table.columns:
            lines.append(f"    {column.name}: {self.field_type(column)}")
        return "\n".join(lines) + "\n"
