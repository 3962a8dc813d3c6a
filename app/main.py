import logging
import sys

import matplotlib.pyplot as plt

from app.core import config
from app.services.system import log_mem
from src.data.load_yields import load_yields
from src.data.models import DatasetError
from src.visuals import ChartAssembler, export_gif

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def main() -> int:
    _configure_logging()
    try:
        dataset = load_yields(config.DATA_PATH)
    except (OSError, DatasetError) as e:
        logger.error("cannot load %s: %s", config.DATA_PATH, e)
        return 1
    log_mem("After load_yields")

    if config.OUTPUT_PATH:
        export_gif(
            dataset,
            config.OUTPUT_PATH,
            cycles=config.EXPORT_CYCLES,
            fps=config.EXPORT_FPS,
            title=config.CHART_TITLE,
        )
        log_mem("After export_gif")
        return 0

    chart = ChartAssembler(
        dataset,
        title=config.CHART_TITLE,
        on_cycle=lambda n: log_mem(f"Playback cycle {n}"),
    )
    chart.assemble()
    plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
