import logging
import re
import threading
from dataclasses import dataclass
from pathlib import Path

from config import IconConfig, wordpress_set

logger = logging.getLogger(__name__)

# non-greedy so neighbouring comments don't swallow the markup between them
COMMENT_PATTERN = re.compile(r"<!--.*?-->", flags=re.DOTALL)

IconData = dict[str, dict[str, str]]


@dataclass(frozen=True)
class IconQuery:
    """Query parameters accepted by the icons endpoint"""

    set: str | None = None
    icon: str | None = None
    sets: bool = False

    @classmethod
    def from_args(cls, args: dict) -> "IconQuery":
        """Parse request args, empty values count as missing"""
        sets_flag = args.get("sets")
        return cls(
            set=args.get("set") or None,
            icon=args.get("icon") or None,
            sets=sets_flag is not None
            and sets_flag.strip().lower() not in ("", "0", "false"),
        )


def strip_comments(markup: str) -> str:
    """Remove all <!-- --> blocks"""
    return COMMENT_PATTERN.sub("", markup)


def recolor_wordpress_svg(markup: str) -> str:
    """
    Make wordpress icons inherit the text colour.
    Plain substring replacement, not attribute aware: any fill="none" is dropped
    """
    return markup.replace("<svg ", '<svg fill="currentColor" ').replace(
        'fill="none"', ""
    )


def transform_icon(set_name: str, markup: str) -> str:
    if set_name == wordpress_set:
        markup = recolor_wordpress_svg(markup)
    return strip_comments(markup)


def load_icon_set(set_name: str, directory: Path) -> dict[str, str] | None:
    """Load every svg in a directory (non-recursive), None if it can't be read"""
    try:
        files = sorted(
            f for f in directory.iterdir() if f.suffix == ".svg" and f.is_file()
        )
    except OSError as error:
        logger.warning(f"Skipping icon set '{set_name}' ({directory}): {error}")
        return None

    icons = {}
    for f in files:
        try:
            markup = f.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            logger.warning(f"Skipping icon {f}: {error}")
            continue
        icons[f.stem] = transform_icon(set_name, markup)

    logger.debug(f"Loaded {len(icons)} icons from set '{set_name}'")
    return icons


def get_icon_data(sets: dict[str, Path]) -> IconData:
    """Build the icon store: set name -> icon name -> markup"""
    icon_data = {}
    for set_name, directory in sets.items():
        icons = load_icon_set(set_name, Path(directory))
        if icons is not None:
            icon_data[set_name] = icons
    return icon_data


def get_icon_set_names(icon_data: IconData) -> list[str]:
    return list(icon_data.keys())


def get_icon_set(icon_data: IconData, set_name: str) -> dict[str, str] | None:
    return icon_data.get(set_name)


def get_icon(icon_data: IconData, set_name: str, icon_name: str) -> str | None:
    """Get a single icon's markup"""
    icons = icon_data.get(set_name)
    if icons is None:
        return None
    return icons.get(icon_name)


def _directory_signature(directory: Path) -> tuple:
    try:
        stat = directory.stat()
        entries = sorted(
            (f.name, f.stat().st_mtime_ns)
            for f in directory.iterdir()
            if f.suffix == ".svg" and f.is_file()
        )
    except OSError:
        # a missing dir is a valid state, it just has no icons
        return (None,)
    return (stat.st_mtime_ns, tuple(entries))


class IconStore:
    """
    Hands out icon data for a config.
    Without caching every call rebuilds the data from disk. With caching the
    last build is reused until a directory listing or file mtime changes
    """

    def __init__(self, config: IconConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._data: IconData | None = None
        self._signature: tuple | None = None

    def signature(self) -> tuple:
        return tuple(
            (name, str(directory), _directory_signature(Path(directory)))
            for name, directory in self.config.sets.items()
        )

    def get(self) -> IconData:
        if not self.config.cache:
            return get_icon_data(self.config.sets)

        signature = self.signature()
        with self._lock:
            if self._data is not None and self._signature == signature:
                return self._data

        # build outside the lock, then swap
        data = get_icon_data(self.config.sets)
        with self._lock:
            self._data = data
            self._signature = signature
        logger.info(f"Rebuilt icon cache ({len(data)} sets)")
        return data

    def clear(self) -> None:
        with self._lock:
            self._data = None
            self._signature = None
