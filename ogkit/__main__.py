"""ogkit CLI entry point.

Delegates to ``ogkit.cli`` which houses all Click commands, so that
``python -m ogkit`` and the ``ogkit`` console script resolve here.
"""

from __future__ import annotations

from ogkit.cli import cli


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
