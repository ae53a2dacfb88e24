from ..models import TableSchema, TargetLanguage
from .base_emitter import BaseEmitter


class TypeScriptEmitter(BaseEmitter):
    language = TargetLanguage.TYPESCRIPT

    def emit(self, table: TableSchema) -> str:
        lines = [f"interface {table.name} {{"]
        for column in table.columns:
            marker = self.type_mapper.optional_marker(self.language, column.nullable)
            lines.append(f"    {column.name}{marker}: {self.field_type(column)};")
        lines.append("}")
        return "\n".join(lines) + "\n"
