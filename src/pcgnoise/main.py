import logging
from logging import StreamHandler

from pcgnoise.render import RenderConfig, render, save_png


def setup_logging(level: int = logging.INFO) -> None:
    """Console logging for the demo. Safe to call more than once."""
    logger = logging.getLogger()
    logger.setLevel(level)
    if getattr(logger, "_pcgnoise_handler_installed", False):
        return

    handler = StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger._pcgnoise_handler_installed = True  # type: ignore[attr-defined]


def main():
    setup_logging()
    cfg = RenderConfig()
    values, _ = render(cfg)
    save_png(values, cfg.output)


if __name__ == "__main__":
    main()
