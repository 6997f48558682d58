"""Module entrypoint for ``python -m filepicker``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and picker setup happen in ``filepicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
