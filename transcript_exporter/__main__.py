"""Package entry point for ``python -m transcript_exporter``.

WHY: Users run the exporter as ``python -m transcript_exporter input.json``
without installing the console script.

HOW: Delegates straight to the CLI's main() function.
"""

from transcript_exporter.cli import main

if __name__ == "__main__":
    main()
