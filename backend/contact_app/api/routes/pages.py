"""
Page routes for the static pages
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from contact_app.core.templates import render_template

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Home page"""
    return render_template("index.html", {"title": "Home", "page": "Home Page"}, request)


@router.get("/product", response_class=HTMLResponse)
async def product(request: Request):
    return render_template("product.html", {"title": "Products", "page": "Products"}, request)


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    """About page (standalone, without the main layout)"""
    return render_template("about.html", {"title": "About", "page": "About"}, request)
