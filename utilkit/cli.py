"""Command-line interface for the utilkit demo"""

import sys
from typing import List, Optional

from rich.console import Console

from .args import parse_args
from .config import Config
from .constants import DEMO_SECTIONS
from .demo import collect_examples, display_examples
from .exceptions import UtilKitError
from .logging_config import setup_logging

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        try:
            config = Config(
                sections=parsed_args.sections or list(DEMO_SECTIONS),
                date_pattern=parsed_args.pattern,
                chunk_size=parsed_args.chunk_size,
                reference_time=parsed_args.reference_time,
                verbose=parsed_args.verbose,
                debug=parsed_args.debug,
            )
        except ValueError as e:
            console.print(f"[red]Invalid configuration: {e}[/red]")
            return 2

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        display_examples(collect_examples(config), console)
        return 0

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    except UtilKitError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
