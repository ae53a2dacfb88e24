from ..models import TableSchema, TargetLanguage
from .base_emitter import BaseEmitter


class CSharpEmitter(BaseEmitter):
    """POCO class with auto-properties. ``System`` covers DateTime, Guid and TimeSpan."""
    language = TargetLanguage.CSHARP

    def emit(self, table: TableSchema) -> str:
        lines = [
            "using System;",
            "",
            f"public class {table.name}",
            "{",
        ]
        for column in table.columns:
            lines.append(f"    public {self.field_type(column)} {column.name} {{ get; set; }}")
        lines.append("}")
        return "\n".join(lines) + "\n"
