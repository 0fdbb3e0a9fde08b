"""
Dependency injection for the blog bounded context.

Provides FastAPI dependency functions that wire the infrastructure
adapter into use cases via constructor injection.
These are the composition root for the blog context. The engine and
container are created once at startup and read from `app.state`.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.application.blog.count_blog_words import CountBlogWordsUseCase
from app.application.blog.create_blog import CreateBlogUseCase
from app.application.blog.delete_blog import DeleteBlogUseCase
from app.application.blog.get_blog import GetBlogUseCase
from app.application.blog.list_blogs import ListBlogsUseCase
from app.application.blog.update_blog import UpdateBlogUseCase
from app.core.container import Container
from app.domain.blog.ports import BlogRepository
from app.infrastructure.blog.repository import SQLAlchemyBlogRepository


def get_container(request: Request) -> Container:
    """Return the application's dependency container."""
    return request.app.state.container


def get_engine(request: Request) -> Engine:
    """Return the engine opened during startup."""
    return request.app.state.engine


def get_blog_repository(
    container: Container = Depends(get_container),
    engine: Engine = Depends(get_engine),
) -> BlogRepository:
    """Build the blog repository adapter."""
    return SQLAlchemyBlogRepository(container=container, engine=engine)


def get_create_blog_use_case(
    repository: BlogRepository = Depends(get_blog_repository),
    container: Container = Depends(get_container),
) -> CreateBlogUseCase:
    """Build CreateBlogUseCase with its infrastructure dependencies."""
    return CreateBlogUseCase(creator=repository, container=container)


def get_blog_use_case(
    repository: BlogRepository = Depends(get_blog_repository),
    container: Container = Depends(get_container),
) -> GetBlogUseCase:
    """Build GetBlogUseCase with its infrastructure dependencies."""
    return GetBlogUseCase(getter=repository, container=container)


def get_list_blogs_use_case(
    repository: BlogRepository = Depends(get_blog_repository),
    container: Container = Depends(get_container),
) -> ListBlogsUseCase:
    """Build ListBlogsUseCase with its infrastructure dependencies."""
    return ListBlogsUseCase(getter=repository, container=container)


def get_update_blog_use_case(
    repository: BlogRepository = Depends(get_blog_repository),
    container: Container = Depends(get_container),
) -> UpdateBlogUseCase:
    """Build UpdateBlogUseCase with its infrastructure dependencies."""
    return UpdateBlogUseCase(updater=repository, container=container)


def get_delete_blog_use_case(
    repository: BlogRepository = Depends(get_blog_repository),
    container: Container = Depends(get_container),
) -> DeleteBlogUseCase:
    """Build DeleteBlogUseCase with its infrastructure dependencies."""
    return DeleteBlogUseCase(deleter=repository, container=container)


def get_count_blog_words_use_case(
    repository: BlogRepository = Depends(get_blog_repository),
    container: Container = Depends(get_container),
) -> CountBlogWordsUseCase:
    """Build CountBlogWordsUseCase with its infrastructure dependencies."""
    return CountBlogWordsUseCase(getter=repository, container=container)
