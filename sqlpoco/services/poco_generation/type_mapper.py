"""
Table-driven mapping from SQL type tokens to target-language type names.

The table lives in ``config/codegen/type_mappings.json``:

{
    "types": { "INT": {"csharp": "int", "java": "int", ...}, ... },
    "languages": {
        "csharp": {"fallback": "object", "nullable": {...}, "imports": {...}},
        ...
    }
}

Nullable policy is fixed per language through ``nullable.strategy``:

- ``suffix``  append a marker to value types (C# ``int?``); ``exempt`` types
  are reference types and stay as they are.
- ``boxed``   swap primitives for their wrapper class (Java ``Integer``).
- ``marker``  leave the type alone; the emitter marks the field itself
  (TypeScript ``name?: string``).
- ``generic`` wrap in a template (Python ``Optional[int]``).
"""
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from sqlpoco.utils.logger import setup_logger
from .models import TargetLanguage
from .utils.config_loader import load_json_from_codegen_config

TYPE_MAPPINGS_FILE = 'type_mappings.json'


def _freeze(value):
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


class TypeMapper:
    """Read-only lookup over the type-mapping table. Safe to share between requests."""

    def __init__(self, mapping: Optional[Mapping] = None):
        self.logger = setup_logger('TypeMapper')
        raw = mapping if mapping is not None else load_json_from_codegen_config(self.logger, TYPE_MAPPINGS_FILE)
        if not raw or not raw.get('types') or not raw.get('languages'):
            raise RuntimeError(f"Type mapping table '{TYPE_MAPPINGS_FILE}' is missing or empty")

        self._types = _freeze({k.upper(): v for k, v in raw['types'].items()})
        self._languages = _freeze(dict(raw['languages']))

        missing = [lang.value for lang in TargetLanguage if lang.value not in self._languages]
        if missing:
            raise RuntimeError(f"Type mapping table has no section for: {', '.join(missing)}")
        self.logger.debug(f"TypeMapper loaded {len(self._types)} SQL types for {len(self._languages)} languages.")

    def _settings(self, language: TargetLanguage) -> Mapping:
        return self._languages[TargetLanguage.from_identifier(language).value]

    def sql_types(self) -> List[str]:
        return list(self._types)

    def is_known(self, sql_type: str) -> bool:
        return (sql_type or '').upper() in self._types

    def fallback_type(self, language: TargetLanguage) -> str:
        return self._settings(language)['fallback']

    def base_type(self, sql_type: str, language: TargetLanguage) -> str:
        """Type name without any nullable wrapping; unknown types get the fallback."""
        language = TargetLanguage.from_identifier(language)
        entry = self._types.get((sql_type or '').upper())
        if entry is None or language.value not in entry:
            return self.fallback_type(language)
        return entry[language.value]

    def map_type(self, sql_type: str, nullable: bool, language: TargetLanguage) -> str:
        type_name = self.base_type(sql_type, language)
        if not nullable:
            return type_name

        policy = self._settings(language)['nullable']
        strategy = policy['strategy']
        if strategy == 'suffix':
            if type_name in policy.get('exempt', ()):
                return type_name
            return type_name + policy['suffix']
        if strategy == 'boxed':
            return policy['boxed'].get(type_name, type_name)
        if strategy == 'generic':
            return policy['template'].format(type=type_name)
        # 'marker': nullability is expressed on the field, not the type
        return type_name

    def optional_marker(self, language: TargetLanguage, nullable: bool) -> str:
        """Marker appended to the field name for marker-strategy languages."""
        policy = self._settings(language)['nullable']
        if nullable and policy['strategy'] == 'marker':
            return policy['marker']
        return ''

    def imports_for(self, language: TargetLanguage, type_names: Iterable[str]) -> List[str]:
        """Sorted, de-duplicated import sources for the given type names.

        The import table maps a type name to where it comes from; for Java
        that is the fully-qualified class, for Python the module.
        """
        imports = self.import_table(language)
        return sorted({imports[name] for name in type_names if name in imports})

    def import_table(self, language: TargetLanguage) -> Mapping:
        return self._settings(language).get('imports', MappingProxyType({}))

    def nullable_requirement(self, language: TargetLanguage) -> Optional[str]:
        """Type name the nullable wrapper itself needs imported, if any."""
        return self._settings(language)['nullable'].get('requires')


@lru_cache(maxsize=1)
def get_type_mapper() -> TypeMapper:
    """Shared mapper built from the packaged JSON table."""
    return TypeMapper()
