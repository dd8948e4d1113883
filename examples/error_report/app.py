"""Readable error reports for broken views.

Every trellis error carries a searchable code. ``format_compact()`` turns
one into a short terminal diagnostic with the failing view, the chain of
views that led to it, a hint and a docs link. Colours follow the terminal
(``NO_COLOR`` and ``FORCE_COLOR`` are honoured).

Run:
    python app.py
"""

from pathlib import Path

from trellis import Renderer, ViewError

renderer = Renderer(Path(__file__).parent / "views")


def report(view: str) -> tuple[ViewError, str]:
    try:
        renderer.render(view)
    except ViewError as exc:
        return exc, exc.format_compact()
    raise AssertionError(f"{view} rendered without error")


block_error, block_report = report("page")
missing_error, missing_report = report("pages/hom")


def main() -> None:
    print(block_report)
    print()
    print(missing_report)


if __name__ == "__main__":
    main()
