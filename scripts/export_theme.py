import argparse
import logging
from pathlib import Path

from app.theme import render_tailwind_config

logger = logging.getLogger(__name__)


def export_theme(output: Path) -> Path:
    output.write_text(render_tailwind_config(), encoding="utf-8")
    return output


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Write tailwind.config.js")
    parser.add_argument("--output", default="tailwind.config.js", type=Path)
    args = parser.parse_args()

    try:
        path = export_theme(args.output)
        logger.info(f"Theme written to {path}")
    except OSError as e:
        logger.error(f"Theme export failed: {e}", exc_info=True)
        raise SystemExit(1)
