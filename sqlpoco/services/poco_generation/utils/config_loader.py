import json
from pathlib import Path
from typing import Dict, Any
import logging

# sqlpoco/config/codegen, resolved from this file so it works for installed packages too.
CODEGEN_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / 'config' / 'codegen'


def load_json_from_codegen_config(logger: Any, config_filename: str) -> Dict:
    """
    Loads a JSON configuration file from the code-generation config directory.
    Expected path structure: sqlpoco/config/codegen/{config_filename}

    Returns an empty dict when the file is missing or unreadable; callers
    decide whether an empty configuration is acceptable.
    """
    effective_logger = logger if logger is not None else logging.getLogger(__name__)
    full_config_path = CODEGEN_CONFIG_DIR / config_filename
    try:
        if not full_config_path.exists():
            effective_logger.error(f"Configuration file not found: {full_config_path}")
            return {}

        with open(full_config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            effective_logger.debug(f"Successfully loaded configuration from {full_config_path}")
            return data
    except json.JSONDecodeError as jde:
        effective_logger.error(f"Error decoding JSON from {str(full_config_path)}: {jde}", exc_info=True)
        return {}
    except (IOError, OSError) as ioe:
        effective_logger.error(f"File system error (IOError/OSError) loading configuration file {str(full_config_path)}: {ioe}", exc_info=True)
        return {}
