"""
FastAPI router for the blog bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.

Routes follow the CRUD verbs of a "blogs" collection resource. The
collection routes need the trailing slash. Item routes use the int
convertor: a non-numeric segment skips them instead of failing
validation, so literal siblings such as "/new" stay reachable.
"""

from fastapi import APIRouter, Depends, Response, status

from app.application.blog.count_blog_words import CountBlogWordsUseCase
from app.application.blog.create_blog import CreateBlogUseCase
from app.application.blog.delete_blog import DeleteBlogUseCase
from app.application.blog.dtos import CreateBlogCommand, UpdateBlogCommand
from app.application.blog.get_blog import GetBlogUseCase
from app.application.blog.list_blogs import ListBlogsUseCase
from app.application.blog.update_blog import UpdateBlogUseCase
from app.interfaces.blog.dependencies import (
    get_blog_use_case,
    get_count_blog_words_use_case,
    get_create_blog_use_case,
    get_delete_blog_use_case,
    get_list_blogs_use_case,
    get_update_blog_use_case,
)
from app.interfaces.blog.schemas import (
    BlogResponse,
    CreateBlogRequest,
    ErrorResponse,
    UpdateBlogRequest,
)

router = APIRouter(prefix="/blogs", tags=["blogs"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get(
    "/",
    response_model=list[BlogResponse],
    summary="List blogs",
)
def index(
    use_case: ListBlogsUseCase = Depends(get_list_blogs_use_case),
) -> list[BlogResponse]:
    """Return every blog that has not been deleted."""
    return [BlogResponse.from_entity(blog) for blog in use_case.execute()]


@router.get(
    "/new",
    responses={501: {"model": ErrorResponse}},
    summary="New blog form (not implemented)",
)
def new() -> None:
    """Reserved for a creation form; the API does not serve one."""
    raise NotImplementedError("blog creation form is not served by the API")


@router.get(
    "/{blog_id:int}",
    response_model=BlogResponse,
    responses=NOT_FOUND,
    summary="Fetch a blog",
)
def show(
    blog_id: int,
    use_case: GetBlogUseCase = Depends(get_blog_use_case),
) -> BlogResponse:
    """Return a single blog by id."""
    return BlogResponse.from_entity(use_case.execute(blog_id))


@router.get(
    "/{blog_id}/words",
    response_model=dict[str, int],
    responses=NOT_FOUND,
    summary="Word count of a blog",
)
def show_word_count(
    blog_id: int,
    use_case: CountBlogWordsUseCase = Depends(get_count_blog_words_use_case),
) -> dict[str, int]:
    """Return how many times each word occurs in the blog body."""
    return use_case.execute(blog_id)


@router.post(
    "/",
    response_model=BlogResponse,
    responses={409: {"model": ErrorResponse}},
    summary="Create a blog",
)
def create(
    request: CreateBlogRequest,
    use_case: CreateBlogUseCase = Depends(get_create_blog_use_case),
) -> BlogResponse:
    """Create a blog from a title and body."""
    command = CreateBlogCommand(title=request.title, body=request.body)
    return BlogResponse.from_entity(use_case.execute(command))


@router.put(
    "/{blog_id:int}",
    response_model=BlogResponse,
    responses={**NOT_FOUND, 409: {"model": ErrorResponse}},
    summary="Replace a blog",
)
def update(
    blog_id: int,
    request: UpdateBlogRequest,
    use_case: UpdateBlogUseCase = Depends(get_update_blog_use_case),
) -> BlogResponse:
    """Overwrite the title and body of a blog."""
    command = UpdateBlogCommand(blog_id=blog_id, title=request.title, body=request.body)
    return BlogResponse.from_entity(use_case.execute(command))


@router.delete(
    "/{blog_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a blog",
)
def delete(
    blog_id: int,
    use_case: DeleteBlogUseCase = Depends(get_delete_blog_use_case),
) -> Response:
    """Soft-delete a blog. Deleting an unknown id succeeds silently."""
    use_case.execute(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
