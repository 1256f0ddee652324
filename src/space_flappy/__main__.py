import logging

from .app import SpaceFlappyApp
from .config import GameConfig


def main():
    config = GameConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    SpaceFlappyApp(config).run()


if __name__ == "__main__":
    main()
