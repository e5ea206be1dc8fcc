"""Display settings read from grafos.yml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Union

import yaml

CONFIG_NAME = "grafos.yml"


class DisplayConfig:

    """Settings for rendering graphs.

    Starts from the defaults and takes each value from the YAML file that has
    the right type. Anything else is logged and ignored, so a broken file never
    stops the graph from printing:

        cfg = DisplayConfig.find()
        width = cfg["cell_width"]
    """

    defaults: Dict[str, Any] = {
        "cell_width": 3,
        "empty_marker": "∅",
        "separator": ", ",
        "numeric_labels": False,
    }

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self.data = dict(self.defaults)

    def __repr__(self) -> str:
        return f"DisplayConfig(path={self.path!r}, data={self.data!r})"

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    @property
    def source(self) -> str:
        return str(self.path) if self.path else "<config>"

    def update(self, values: Mapping[str, Any]):
        """Take the well-typed known values, logging the rest."""
        for key, value in values.items():
            if key not in self.defaults:
                logging.warning("%s: unknown key %r", self.source, key)
            elif not valid_value(key, value):
                logging.error("%s: bad value for %s: %r", self.source, key, value)
            else:
                self.data[key] = value

    def read(self, stream: Union[str, TextIO]):
        try:
            values = yaml.safe_load(stream)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", self.source, ex)
            return
        if values is None:
            return
        if not isinstance(values, dict):
            logging.error("%s: expected a mapping, got %s", self.source, type(values))
            return
        self.update(values)

    @staticmethod
    def loads(content: str, path: Optional[Path] = None) -> DisplayConfig:
        cfg = DisplayConfig(path)
        cfg.read(content)
        return cfg

    @staticmethod
    def load(path: Path) -> DisplayConfig:
        cfg = DisplayConfig(path)
        with open(path, encoding="utf-8") as f:
            cfg.read(f)
        return cfg

    @staticmethod
    def find(start: Optional[Path] = None) -> DisplayConfig:
        """Load grafos.yml from start or its nearest parent that has one.

        Returns the defaults if there is no such file.
        """
        path = (start or Path.cwd()).resolve()
        for directory in [path, *path.parents]:
            candidate = directory / CONFIG_NAME
            if candidate.is_file():
                logging.info("using config %s", candidate)
                return DisplayConfig.load(candidate)
        logging.debug("no %s found, using defaults", CONFIG_NAME)
        return DisplayConfig()


def valid_value(key: str, value: Any) -> bool:
    if key == "cell_width":
        return type(value) is int and value >= 1
    return isinstance(value, type(DisplayConfig.defaults[key]))
