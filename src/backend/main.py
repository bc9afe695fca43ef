"""
Category listing admin FastAPI application.

Main entry point for the backend server.
"""

import logging
from typing import FrozenSet

from fastapi import FastAPI, Depends, HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database.session import get_db, read_only_session
from database.repositories import TermRepository
from admin.pages import page_registry
from admin.notices import notice_queue
from admin.permissions import get_request_capabilities, require_capability
from admin.templates import render_admin_shell
from observability import setup_logging
from services.category_listing import CategoryListing

logger = logging.getLogger(__name__)


# Create FastAPI application
app = FastAPI(
    title="Category Listing Admin",
    description="Admin pages listing the latest published posts per configured category",
    version="0.1.0",
)


@app.on_event("startup")
async def startup_event():
    """Validate configured categories and register their admin pages."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    async with read_only_session() as session:
        listing = CategoryListing(
            TermRepository(session),
            page_registry,
            notice_queue,
            namespace=settings.ADMIN_NAMESPACE,
            capability=settings.ADMIN_CAPABILITY,
            taxonomy_kind=settings.TAXONOMY_KIND,
        )
        result = await listing.run()

    app.state.category_listing = listing
    logger.info(
        f"Category listing ready ({len(listing.registry)} pages, "
        f"{len(result.removed)} invalid categories)"
    )


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns basic service status.
    """
    return {
        "status": "healthy",
        "service": "category-listing-admin",
        "version": "0.1.0"
    }


@app.get("/admin", response_class=HTMLResponse)
async def admin_index(capabilities: FrozenSet[str] = Depends(get_request_capabilities)):
    """
    Admin landing page.

    Shows pending notices and the menu of pages the caller may open.
    """
    return HTMLResponse(
        render_admin_shell(
            title="Dashboard",
            menu=page_registry.menu_for(capabilities),
            notices=notice_queue.render(),
            body="<h1>Dashboard</h1>",
        )
    )


@app.get("/api/admin/categories")
async def admin_list_categories(capabilities: FrozenSet[str] = Depends(get_request_capabilities)):
    """
    List active categories and the ones removed by validation (admin only).

    Requires the same capability as the category pages.

    Returns:
        Categories in menu order, with their page path keys
    """
    require_capability(settings.ADMIN_CAPABILITY, capabilities)

    listing = getattr(app.state, "category_listing", None)
    if listing is None:
        return {"categories": [], "removed": []}
    return listing.describe()


@app.get("/admin/{path_key:path}", response_class=HTMLResponse)
async def admin_page(
    path_key: str,
    capabilities: FrozenSet[str] = Depends(get_request_capabilities),
    db: AsyncSession = Depends(get_db),
):
    """
    Render a registered admin page inside the admin shell.

    Args:
        path_key: Registered page key, e.g. "dfm-wp-public/sports"
        capabilities: Caller's capabilities
        db: Database session

    Returns:
        Full admin HTML page
    """
    page = page_registry.get(path_key)
    if page is None:
        raise HTTPException(status_code=404, detail=f"Admin page '{path_key}' not found")

    require_capability(page.capability, capabilities)

    body = await page.handler(db)
    return HTMLResponse(
        render_admin_shell(
            title=page.title,
            menu=page_registry.menu_for(capabilities),
            notices=notice_queue.render(),
            body=body,
        )
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=True,
    )
