"""Views wrapped in a layout -- the most common real-world pattern.

Each page sets its title block and asks for ``layouts/main``; the layout
renders the navigation partial and places the page output where it reads
the ``"content"`` block.

Run:
    python app.py
"""

from pathlib import Path

from trellis import Renderer

views_dir = Path(__file__).parent / "views"
renderer = Renderer(views_dir)
renderer.add_global("site_name", "My Site")
renderer.add_global(
    "nav_items",
    [
        {"url": "/", "label": "Home"},
        {"url": "/about", "label": "About"},
    ],
)

home_output = renderer.render(
    "pages/home",
    title="Welcome",
    message="This is a trellis-powered site with layouts & blocks.",
)

about_output = renderer.render(
    "pages/about",
    title="About Us",
    description="Views are plain Python files.",
)


def main() -> None:
    print("=== Home Page ===")
    print(home_output)
    print()
    print("=== About Page ===")
    print(about_output)


if __name__ == "__main__":
    main()
