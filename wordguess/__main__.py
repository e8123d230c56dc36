"""Module entrypoint for `python -m wordguess`: play in the terminal."""

from wordguess.cli.play import main_entry

if __name__ == "__main__":  # pragma: no cover
    main_entry()
