"""Package entry point for ``python -m subtitle_styler``.

WHY: Python's ``-m`` flag looks for ``__main__.py`` inside the package
and executes it; this delegates straight to the CLI.
"""

from subtitle_styler.cli import main

if __name__ == "__main__":
    main()
