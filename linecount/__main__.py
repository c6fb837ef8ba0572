"""Module entrypoint for ``python -m linecount``.

This keeps module-mode execution behavior identical to the ``lc`` script.
All argument parsing happens in ``linecount.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
