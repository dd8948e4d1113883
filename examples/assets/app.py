"""Asset URLs with cache busting.

``AssetExtension`` exposes ``asset()`` to views. With ``append_timestamp``
every URL carries the file's modification time, so browsers refetch an
asset as soon as it changes.

Run:
    python app.py
"""

from pathlib import Path

from trellis import AssetExtension, Renderer

here = Path(__file__).parent
public_dir = here / "public"

renderer = Renderer(here / "views")
renderer.add_extension(AssetExtension(public_dir, "/static"))

versioned = Renderer(here / "views")
versioned.add_extension(AssetExtension(public_dir, "/static", append_timestamp=True))

css_mtime = int((public_dir / "css" / "app.css").stat().st_mtime)

plain_output = renderer.render("page", title="Assets")
versioned_output = versioned.render("page", title="Assets")
direct_url = renderer.call("asset", "/js/app.js")


def main() -> None:
    print("=== Plain URLs ===")
    print(plain_output)
    print("=== Versioned URLs ===")
    print(versioned_output)
    print("Called outside a view:", direct_url)


if __name__ == "__main__":
    main()
