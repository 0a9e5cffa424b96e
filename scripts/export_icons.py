# writes the icon store to a json file for static use
# run from the repo root: python scripts/export_icons.py [out.json]

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import IconConfig  # noqa: E402
from icons.utils import get_icon_data  # noqa: E402


def export_icons(config: IconConfig, out_path: Path) -> int:
    """writes every icon set to out_path, returns the number of icons written"""

    icon_data = get_icon_data(config.sets)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(icon_data, indent=2), encoding="utf-8")
    return sum(len(icons) for icons in icon_data.values())


if __name__ == "__main__":
    out = Path(sys.argv[1] if len(sys.argv) > 1 else "icons.json")
    count = export_icons(IconConfig.from_env(), out)
    print(f"Wrote {count} icons to {out}")
    print("done :)")
