"""Package entry point for ``python -m phone_encoder``.

WHY: Users run the encoder as ``python -m phone_encoder words.txt numbers.txt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates straight to the CLI's main() function.
"""

if __name__ == "__main__":
    from phone_encoder.cli import main
    main()
