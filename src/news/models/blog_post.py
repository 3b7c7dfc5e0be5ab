from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...core.database import Base


class BlogPost(Base):
    """
    A summarized news item published as a post.
    source_link is the dedup key across runs.
    """
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(20), nullable=False, default="post")
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)  # the accepted summary
    source_img = Column(String(1000))
    source_name = Column(String(255))
    source_link = Column(String(767), nullable=False, unique=True, index=True)
    created_by = Column(Integer, nullable=False, default=1)
    status = Column(Integer, nullable=False, default=1)
    pub_date = Column(DateTime)
    created_at = Column(DateTime, default=func.now())

    categories = relationship("BlogCategory", back_populates="blog", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<BlogPost(id={self.id}, title='{(self.title or '')[:50]}...', source='{self.source_name}')>"


class BlogCategory(Base):
    __tablename__ = "blog_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    blog_id = Column(Integer, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False, default="category")

    blog = relationship("BlogPost", back_populates="categories")
