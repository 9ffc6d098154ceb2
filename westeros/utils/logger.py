import logging
import os
import sys

from westeros.config_manager import ConfigManager


def setup_logging(config_path="cfg/config.json", default_level=logging.INFO) -> None:
    """Initialize logging for the API process and the CLI.

    Reads the `logging` section of the configuration, creates the log
    directory, and installs a detailed file handler plus a minimal console
    handler on the root logger.

    Args:
        config_path: Path to configuration file (default: cfg/config.json).
        default_level: Console level used when the config does not set one.
    """
    log_cfg = ConfigManager.load(config_path).get("logging", {})

    log_dir = log_cfg.get("log_dir", "logs")
    log_file = log_cfg.get("log_file", "westeros.log")
    file_level = getattr(logging, log_cfg.get("file_level", "DEBUG"), logging.DEBUG)
    console_level = getattr(logging, log_cfg.get("console_level", ""), default_level)

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_file)

    # Clear previous handlers so repeated calls do not duplicate output
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)-28s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_formatter = logging.Formatter("%(message)s")

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(file_level)
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    # uvicorn installs its own handlers; route them through ours
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers.clear()
        logging.getLogger(name).propagate = True

    logging.getLogger(__name__).debug(f"Logging initialized. File: {log_path}")
