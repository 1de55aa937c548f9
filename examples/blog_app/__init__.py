from .demo import (  # noqa: F401
    bootstrap_connection,
    count_posts,
    create_author,
    create_posts,
    delete_posts,
    fetch_posts,
    fetch_published_page,
    make_generator,
    run_demo,
    update_posts,
)

__all__ = [
    "bootstrap_connection",
    "count_posts",
    "create_author",
    "create_posts",
    "delete_posts",
    "fetch_posts",
    "fetch_published_page",
    "make_generator",
    "run_demo",
    "update_posts",
]
