from fastapi import APIRouter, Depends, Request

from app.config import settings
from app.schemas.search import SearchRequest
from app.services.book_search import BookSearchService
from app.viewmodels.search_vm import SearchViewModel

router = APIRouter()


def get_search_service(request: Request) -> BookSearchService:
    return BookSearchService(request.app.state.connector)


@router.get("/")
async def index(request: Request):
    return request.app.state.templates.TemplateResponse(
        "index.html",
        {"request": request, "app_name": settings.app_name},
    )


@router.get("/hello")
async def hello(request: Request):
    return request.app.state.templates.TemplateResponse(
        "hello.html",
        {"request": request, "app_name": settings.app_name, "science": "Hello from Andy's book store"},
    )


@router.get("/search")
async def search(
    request: Request,
    q: str = "",
    page: str = "",
    service: BookSearchService = Depends(get_search_service),
):
    if not q:
        return await index(request)

    vm = await SearchViewModel.search(service, SearchRequest(query=q, page_token=page))
    return request.app.state.templates.TemplateResponse(
        "search/results.html",
        {"request": request, "app_name": settings.app_name, "vm": vm},
        status_code=502 if vm.failed else 200,
    )
