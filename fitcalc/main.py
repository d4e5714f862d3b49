from loguru import logger

from fitcalc.config import settings
from fitcalc.kernel.presets import list_presets
from fitcalc.kernel.report import read_data
from fitcalc.log import setup_logger


def main() -> None:
    setup_logger(settings.log_level)
    for preset in list_presets():
        logger.debug(f"Preset {preset.id}: {preset.description}")
        print(read_data(preset.training))


if __name__ == "__main__":
    main()
