from .load import load_config
from .paths import CFG_FILE, cfg_path

__all__ = ["load_config", "CFG_FILE", "cfg_path"]
