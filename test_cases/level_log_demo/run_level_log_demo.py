import argparse
from pathlib import Path

from src.level_log.config import LoggerConfig
from src.level_log.console import create_console_logger
from src.level_log.severity import Severity


def main() -> None:
    parser = argparse.ArgumentParser(description="Log the demo lines at every severity.")
    parser.add_argument("--config", type=Path, help="JSON or YAML file with a log_level key")
    args = parser.parse_args()

    logger = create_console_logger(LoggerConfig.from_env(), config_path=args.config)

    logger.log(Severity.SEVERE, "CRITICAL ERROR")
    logger.log(Severity.WARN, "Low disk space")
    logger.log(Severity.INFO, "User logged in")
    logger.log(Severity.DEBUG, "Debugging x=42")
    logger.log(Severity.TRACE, "Entered function foo()")


if __name__ == "__main__":
    main()
