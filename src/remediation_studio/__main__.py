"""Package entry point.

Preferred invocation is via the installed console script:

    remediation-studio ...

For convenience we also support:

    python -m remediation_studio ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m remediation_studio`."""

    app()


if __name__ == "__main__":
    main()
