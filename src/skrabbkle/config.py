"""Game configuration loader."""

import yaml
import jsonschema
from dataclasses import dataclass, field
from pathlib import Path

from skrabbkle.core.errors import ConfigurationError
from skrabbkle.core.schemas import load_packaged_schema


@dataclass
class GameSettings:
    board: Path | None = None  # None = packaged default board
    word_list: Path | None = None  # None = packaged word list
    open: bool | None = None  # None = ask at the console
    seed: int | None = None
    human_name: str = "Human player"
    computer_name: str = "Computer player"


@dataclass
class SearchSettings:
    max_candidates: int | None = None
    time_limit_s: float | None = None


@dataclass
class LoggingSettings:
    level: str = "WARNING"
    telemetry_dir: Path | None = None  # None = no JSONL game logs


@dataclass
class GameConfig:
    game: GameSettings = field(default_factory=GameSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def default_config() -> GameConfig:
    return GameConfig()


def _optional_path(value: str | None, base: Path) -> Path | None:
    if value is None:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def parse_config(raw: dict | None, base_dir: Path = Path("."), source: str = "<config>") -> GameConfig:
    """Validate a config mapping and build a GameConfig.

    Relative paths are resolved against ``base_dir``.
    """
    raw = raw or {}
    try:
        jsonschema.validate(instance=raw, schema=load_packaged_schema("config"))
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigurationError(source, f"{where}: {exc.message}") from exc

    g = raw.get("game") or {}
    s = raw.get("search") or {}
    lg = raw.get("logging") or {}

    return GameConfig(
        game=GameSettings(
            board=_optional_path(g.get("board"), base_dir),
            word_list=_optional_path(g.get("word_list"), base_dir),
            open=g.get("open"),
            seed=g.get("seed"),
            human_name=g.get("human_name", "Human player"),
            computer_name=g.get("computer_name", "Computer player"),
        ),
        search=SearchSettings(
            max_candidates=s.get("max_candidates"),
            time_limit_s=s.get("time_limit_s"),
        ),
        logging=LoggingSettings(
            level=lg.get("level", "WARNING"),
            telemetry_dir=_optional_path(lg.get("telemetry_dir"), base_dir),
        ),
    )


def load_config(path: Path) -> GameConfig:
    """Load game config from YAML file."""
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(str(path), f"cannot read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(str(path), f"invalid YAML: {exc}") from exc

    if raw is not None and not isinstance(raw, dict):
        raise ConfigurationError(str(path), "top level must be a mapping")
    return parse_config(raw, base_dir=path.parent, source=str(path))
