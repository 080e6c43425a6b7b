"""Module entrypoint for ``python -m fsvisitor``.

All argument parsing happens in ``fsvisitor.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
