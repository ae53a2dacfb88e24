"""One code emitter per supported target language."""
from typing import Optional

from ..models import TargetLanguage
from ..type_mapper import TypeMapper
from .base_emitter import BaseEmitter
from .csharp_emitter import CSharpEmitter
from .java_emitter import JavaEmitter
from .python_emitter import PythonEmitter
from .typescript_emitter import TypeScriptEmitter

EMITTERS = {
    TargetLanguage.CSHARP: CSharpEmitter,
    TargetLanguage.JAVA: JavaEmitter,
    TargetLanguage.TYPESCRIPT: TypeScriptEmitter,
    TargetLanguage.PYTHON: PythonEmitter,
}


def get_emitter(language, type_mapper: Optional[TypeMapper] = None) -> BaseEmitter:
    """Emitter for a language identifier (case-insensitive).

    Raises:
        UnsupportedLanguageError: for identifiers outside ``TargetLanguage``.
    """
    return EMITTERS[TargetLanguage.from_identifier(language)](type_mapper)


__all__ = [
    'BaseEmitter',
    'CSharpEmitter',
    'JavaEmitter',
    'PythonEmitter',
    'TypeScriptEmitter',
    'EMITTERS',
    'get_emitter',
]
