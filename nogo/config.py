# config.py
# Runtime settings, read from a TOML file.
#
# Lookup order: explicit path, $NOGO_CONFIG, ./nogo.toml. Settings live under
# [nogo] (or [tool.nogo] when kept in a pyproject-style file). A missing or
# broken file never stops the game, the defaults are used instead.
import os
import sys
from dataclasses import dataclass, fields
from typing import Optional, Tuple

import toml

from nogo.board_model import EMPTY, TOKEN_A, TOKEN_B

DEBUG = False

DEFAULT_PATH = "nogo.toml"
ENV_PATH = "NOGO_CONFIG"
ENV_DEBUG = "NOGO_DEBUG"


def debug(tag: str, *args):
    if DEBUG:
        print(f"[{tag}]", *args, file=sys.stderr)


@dataclass
class NogoConfig:
    tokens: Tuple[str, str] = (TOKEN_A, TOKEN_B)
    empty: str = EMPTY
    max_line: int = 70
    save_prefix: str = "w"
    debug: bool = False

    def validate(self) -> None:
        a, b = self.tokens
        for ch in (a, b, self.empty):
            if not isinstance(ch, str) or len(ch) != 1 or ch.isspace():
                raise ValueError(f"token must be a single visible character: {ch!r}")
        if len({a, b, self.empty}) != 3:
            raise ValueError("player tokens and empty marker must be distinct")
        if not isinstance(self.max_line, int) or self.max_line < 2:
            raise ValueError("max_line must be an integer >= 2")
        if not self.save_prefix:
            raise ValueError("save_prefix must not be empty")


def _section(data: dict) -> dict:
    if isinstance(data.get("nogo"), dict):
        return data["nogo"]
    tool = data.get("tool", {})
    if isinstance(tool, dict) and isinstance(tool.get("nogo"), dict):
        return tool["nogo"]
    return {}


def load_config(path: Optional[str] = None) -> NogoConfig:
    if path is None:
        path = os.environ.get(ENV_PATH, DEFAULT_PATH)
    if not os.path.exists(path):
        cfg = NogoConfig()
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = toml.load(f)
            known = {f.name for f in fields(NogoConfig)}
            values = {k: v for k, v in _section(data).items() if k in known}
            if "tokens" in values:
                values["tokens"] = tuple(values["tokens"])
            cfg = NogoConfig(**values)
            cfg.validate()
        except (OSError, toml.TomlDecodeError, TypeError, ValueError) as e:
            print("[Config] failed to load", path, e, file=sys.stderr)
            cfg = NogoConfig()
    if os.environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes"):
        cfg.debug = True
    return cfg
