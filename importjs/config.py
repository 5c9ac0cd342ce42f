# ==========================================
# CONFIGURATION
# ==========================================
import json
import os
from typing import Dict, Optional

from pydantic import BaseModel, ValidationError

from .errors import ConfigurationError
from .task import ImportJavascript

CONFIG_PATHS = ["importjs.json", os.path.expanduser("~/.importjs/config.json")]


class TaskConfig(BaseModel):
    """Settings of an ImportJavascript run, as found in importjs.json."""
    destinations: Dict[str, str] = {}
    write_file: bool = True
    base_dir: Optional[str] = None

    def resolve(self, path):
        """Make a relative path of the config relative to its base directory."""
        if self.base_dir and not os.path.isabs(path):
            return os.path.join(self.base_dir, path)
        return path

    def destinations_map(self):
        return {self.resolve(src): self.resolve(dest) for src, dest in self.destinations.items()}

    def build_task(self, logger=None):
        task = ImportJavascript(self.destinations_map(), logger=logger)
        if not self.write_file:
            task.disable_write_file()
        return task


def load_config(path=None):
    """
    Load the task configuration from `path`, or from the first of
    CONFIG_PATHS that exists. Returns an empty config when there is none.
    """
    paths = [path] if path else CONFIG_PATHS
    for p in paths:
        if not os.path.exists(p):
            continue
        try:
            with open(p, "r", encoding="utf-8") as f:
                raw = json.load(f)
            config = TaskConfig.model_validate(raw)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration file `{p}`: {e}", path=p) from e
        if config.base_dir is None:
            config.base_dir = os.path.dirname(os.path.abspath(p))
        return config

    if path:
        raise ConfigurationError(f"Impossible to find configuration file `{path}`", path=path)
    return TaskConfig()
