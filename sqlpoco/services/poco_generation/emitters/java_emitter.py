from ..models import TableSchema, TargetLanguage
from .base_emitter import BaseEmitter


JAVA_KEYWORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char", "class", "const",
    "continue", "default", "do", "double", "else", "enum", "extends", "false", "final", "finally",
    "float", "for", "goto", "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "null", "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws", "transient", "true", "try",
    "void", "volatile", "while", "_",
})


def capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


class JavaEmitter(BaseEmitter):
    """JavaBean: private fields followed by a getter/setter pair per column."""
    language = TargetLanguage.JAVA
    reserved_words = JAVA_KEYWORDS

    def emit(self, table: TableSchema) -> str:
        self.warn_unusable_names(table)
        lines = []
        imports = self.type_mapper.imports_for(self.language, self.base_types(table))
        for qualified_name in imports:
            lines.append(f"import {qualified_name};")
        if imports:
            lines.append("")

        lines.append(f"public class {table.name} {{")
        for column in table.columns:
            lines.append(f"    private {self.field_type(column)} {column.name};")

        for column in table.columns:
            java_type = self.field_type(column)
            accessor = capitalize_first(column.name)
            lines.extend([
                "",
                f"    public {java_type} get{accessor}() {{",
                f"        return {column.name};",
                "    }",
                "",
                f"    public void set{accessor}({java_type} {column.name}) {{",
                f"        this.{column.name} = {column.name};",
                "    }",
            ])

        lines.append("}")
        return "\n".join(lines) + "\n"
