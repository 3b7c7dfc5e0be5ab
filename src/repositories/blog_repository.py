from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import PersistenceError
from src.news.models.blog_post import BlogPost, BlogCategory


class BlogRepository:
    def __init__(self, db: Session):
        self.db = db

    def exists_by_source_link(self, source_link: str) -> bool:
        stmt = select(BlogPost.id).where(BlogPost.source_link == source_link).limit(1)
        return self.db.execute(stmt).first() is not None

    def insert_post(
        self,
        title: str,
        description: str,
        source_link: str,
        source_name: Optional[str] = None,
        source_img: Optional[str] = None,
        pub_date: Optional[datetime] = None,
        created_by: int = 1,
        status: int = 1,
    ) -> int:
        post = BlogPost(
            type="post",
            title=title,
            description=description,
            source_img=source_img,
            source_name=source_name,
            source_link=source_link,
            created_by=created_by,
            status=status,
            pub_date=pub_date,
        )
        self.db.add(post)
        self.db.flush()
        return post.id

    def insert_category_link(self, post_id: int, category_id: int) -> None:
        self.db.add(BlogCategory(blog_id=post_id, category_id=category_id, type="category"))
        self.db.flush()

    def save_post_with_category(self, category_id: Optional[int] = None, **post_fields) -> int:
        """Insert a post and, when a category is given, its category link in one transaction."""
        try:
            post_id = self.insert_post(**post_fields)
            if post_id and category_id:
                self.insert_category_link(post_id, category_id)
            self.db.commit()
            return post_id
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                f"Failed to insert post: {e}",
                error_code="INSERT_FAILED",
                details={"source_link": post_fields.get("source_link")}
            ) from e

