"""
Command line helpers: inspect Notion content and freeze the site to HTML.
"""
from __future__ import annotations

import json
import os
import shutil
from dataclasses import asdict
from pathlib import Path
from urllib.parse import quote

import click
from dotenv import load_dotenv

# Load environment variables before the blog package reads its settings
load_dotenv(os.getenv("TRAVESIA_DOTENV", ".env"))


@click.group()
def cli():
    pass


@cli.command("list-articles")
@click.option("--category", default=None, help="Exact category name to filter on.")
def list_articles(category):
    import blog

    for article in blog.get_articles(category):
        click.echo(json.dumps(asdict(article), ensure_ascii=False))


@cli.command("show-article")
@click.argument("article_id")
def show_article(article_id: str):
    import blog

    bundle = blog.get_article(article_id)
    if bundle.detail is None:
        raise click.ClickException(f"Article {article_id} is unavailable")
    payload = {
        "detail": asdict(bundle.detail),
        "nodes": [asdict(node) for node in blog.render_blocks(bundle.blocks)],
    }
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _write_page(client, route: str, target: Path) -> bool:
    response = client.get(route)
    if response.status_code != 200:
        click.echo(f"skip {route} ({response.status_code})", err=True)
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(response.data)
    return True


@cli.command()
@click.option("--out", "out_dir", default="dist", type=click.Path(file_okay=False, path_type=Path))
def build(out_dir: Path):
    """Render the archive, category and article pages into OUT_DIR."""
    import blog
    from app import app
    from blog.archive import total_pages_for

    listings = [("/", out_dir, None)]
    listings += [
        (f"/category/{quote(name)}", out_dir / "category" / name, name)
        for name in blog.SETTINGS.categories
    ]

    previous = app.config.get("FREEZE_STATIC", False)
    app.config["FREEZE_STATIC"] = True
    try:
        client = app.test_client()
        written = 0
        home_articles = []
        for route, base, category in listings:
            articles = blog.get_articles(category)
            if category is None:
                home_articles = articles
            if _write_page(client, route, base / "index.html"):
                written += 1
            for number in range(2, total_pages_for(len(articles)) + 1):
                target = base / "page" / str(number) / "index.html"
                if _write_page(client, f"{route}?page={number}", target):
                    written += 1

        for article in home_articles:
            route = f"/article/{quote(article.id)}"
            if _write_page(client, route, out_dir / "article" / article.id / "index.html"):
                written += 1
    finally:
        app.config["FREEZE_STATIC"] = previous

    static_src = Path(app.static_folder)
    if static_src.exists():
        shutil.copytree(static_src, out_dir / "static", dirs_exist_ok=True)

    click.echo(f"Wrote {written} pages to {out_dir}")


if __name__ == "__main__":  # pragma: no cover
    cli()
