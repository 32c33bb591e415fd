"""Page and API routes for the Travesia blog."""
from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote, urlencode

from flask import g, jsonify, render_template, request

import blog
from app_utils import allowed_image_src, get_current_timestamp
from blog.archive import change_page
from blog.models import ArchiveViewState
from blog.renderer import render_blocks
from blog.settings import BlogSettings

logger = logging.getLogger("travesia")


def register_routes(app, settings: BlogSettings):
    """Register all page and API routes with the Flask app.

    Args:
        app: Flask app instance.
        settings: Loaded blog settings.
    """

    @app.context_processor
    def inject_globals():
        """Inject global variables into templates."""
        now = datetime.now(timezone.utc)
        return {
            "build_time": now.strftime("%Y-%m-%d %H:%M UTC"),
            "current_year": now.year,
            "nav_categories": settings.categories,
            "instagram_url": settings.instagram_url,
            "contact_email": settings.contact_email,
        }

    @app.template_filter("image_src")
    def image_src(url: str) -> str:
        return allowed_image_src(url, settings.image_hosts)

    def _scroll_to_top(state: ArchiveViewState) -> None:
        logger.debug("Archive moved to page %d", state.current_page)
        g.scroll_to_top = True

    def _page_url(state: ArchiveViewState, number: int) -> str:
        if app.config.get("FREEZE_STATIC"):
            # Static hosts ignore query strings, so frozen pages live at page/<n>/.
            base = quote(request.path.rstrip("/"), safe="/")
            return f"{base}/" if number <= 1 else f"{base}/page/{number}/"
        query = urlencode({"q": state.search_term, "sort": state.sort_order.value, "page": number})
        return f"{quote(request.path)}?{query}#top"

    def _archive_view(category: Optional[str]):
        state = ArchiveViewState.from_query(request.args, category)
        if request.args.get("page"):
            state = change_page(state, state.current_page, on_change=_scroll_to_top)
        page = blog.get_archive(state)
        logger.info(
            "Archive category=%s q=%r page=%d -> %d/%d matches shown",
            category,
            state.search_term,
            state.current_page,
            len(page.articles),
            page.total_matches,
        )
        return render_template(
            "archive.html",
            page=page,
            state=state,
            category_name=category or "",
            page_url=lambda number: _page_url(state, number),
            show_toolbar=category is not None and not app.config.get("FREEZE_STATIC"),
            scroll_to_top=g.get("scroll_to_top", False),
        )

    @app.route("/")
    def index():
        """Unfiltered archive."""
        return _archive_view(None)

    @app.route("/category/<path:slug>")
    def category(slug: str):
        """Archive filtered to one category (exact, case-sensitive)."""
        return _archive_view(slug)

    @app.route("/article/<article_id>")
    def article(article_id: str):
        """Single article page."""
        bundle = blog.get_article(article_id)
        if bundle.detail is None:
            logger.warning("Article %s unavailable", article_id)
            return render_template("unavailable.html")
        return render_template(
            "article.html",
            detail=bundle.detail,
            nodes=render_blocks(bundle.blocks),
        )

    @app.route("/api/articles")
    def api_articles():
        """Archive page as JSON; honours category, q, sort and page."""
        try:
            state = ArchiveViewState.from_query(request.args, request.args.get("category"))
            page = blog.get_archive(state)
            return jsonify(
                {
                    "status": "success",
                    "timestamp": get_current_timestamp(),
                    "articles": [asdict(article) for article in page.articles],
                    "total_pages": page.total_pages,
                    "current_page": page.current_page,
                    "total_matches": page.total_matches,
                }
            )
        except Exception as exc:
            logger.error("API articles failed: %s", exc, exc_info=True)
            return jsonify({"status": "error", "error": "Failed to load articles"}), 500

    @app.route("/api/articles/<article_id>")
    def api_article(article_id: str):
        """Article detail plus rendered nodes as JSON."""
        try:
            bundle = blog.get_article(article_id)
            if bundle.detail is None:
                return jsonify({"status": "unavailable", "detail": None, "nodes": []})
            return jsonify(
                {
                    "status": "success",
                    "detail": asdict(bundle.detail),
                    "nodes": [asdict(node) for node in render_blocks(bundle.blocks)],
                }
            )
        except Exception as exc:
            logger.error("API article %s failed: %s", article_id, exc, exc_info=True)
            return jsonify({"status": "error", "error": "Failed to load article"}), 500

    @app.route("/api/system-health")
    def api_system_health():
        """Configuration status snapshot."""
        return jsonify({"status": "ok", **blog.get_status()})

    @app.errorhandler(404)
    def page_not_found(_exc):
        return render_template("unavailable.html"), 404
