"""
Command Line Interface using Fire - interactive recipe book
"""
import fire
import logging
import sys
from pathlib import Path
from typing import Optional

from config import Settings, load_settings
from recipes import RecipeManager
from cli.shell import RecipeShell

__version__ = "1.0.0"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


class RecipeBookCLI:
    """Command-line interface for the recipe book"""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize CLI with configuration"""
        self.config_path = Path(config_path) if config_path else None

        # Load configuration
        self.config: Settings = load_settings(self.config_path)

        # Configure logging
        logging.basicConfig(
            level=getattr(logging, self.config.log_level, logging.WARNING),
            format=LOG_FORMAT
        )

        self.recipe_manager: RecipeManager = RecipeManager(
            calorie_threshold=self.config.calorie_threshold
        )
        logger.debug(f"Recipe book initialized ({self.config.environment})")

    def shell(self) -> None:
        """Run the interactive recipe menu"""
        RecipeShell(self.recipe_manager, settings=self.config.shell).run()

    def version(self) -> None:
        """Show version information"""
        print("Recipe Book")
        print(f"Version: {__version__}")
        print(f"Calorie warning threshold: {self.config.calorie_threshold:g}")


def main():
    """Main CLI entry point"""
    if len(sys.argv) > 1 and sys.argv[1].endswith(('.yaml', '.yml')):
        config_path = sys.argv[1]
        sys.argv = [sys.argv[0]] + sys.argv[2:]  # Remove config from args
    else:
        config_path = None

    try:
        cli = RecipeBookCLI(config_path)
        if len(sys.argv) > 1:
            fire.Fire(cli)
        else:
            cli.shell()
        sys.exit(0)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
