from pathlib import Path

from loguru import logger

from esdsl.config.general import GeneralConfig

DEFAULT_CONFIG_PATH = Path("config/config.default.yaml")


def write_default_configs(path: Path = DEFAULT_CONFIG_PATH) -> Path:
    """Write out config defaults."""
    target = path.resolve()
    GeneralConfig.write_default(target)
    logger.debug(f"Wrote default config to {target}")
    return target
