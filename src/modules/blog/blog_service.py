# src/modules/blog/blog_service.py

from typing import List, Optional
from uuid import UUID
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.models import BlogPost

async def get_all_posts(db: AsyncSession) -> List[BlogPost]:
    """
    Retrieve all blog posts, newest first.
    """
    result = await db.execute(select(BlogPost).order_by(BlogPost.created_at.desc()))
    return list(result.scalars().all())

async def get_post_by_id(post_id: UUID, db: AsyncSession) -> Optional[BlogPost]:
    result = await db.execute(select(BlogPost).where(BlogPost.id == post_id))
    return result.scalars().first()

async def create_post(post_data: dict, db: AsyncSession) -> BlogPost:
    new_post = BlogPost(
        title=post_data["title"],
        content=post_data["content"],
        image=post_data.get("image"),
    )
    db.add(new_post)
    await db.commit()
    await db.refresh(new_post)
    return new_post

async def delete_post(post_id: UUID, db: AsyncSession) -> Optional[BlogPost]:
    """
    Delete a blog post. Returns the deleted post so its image can be cleaned up,
    or None if it did not exist.
    """
    post = await get_post_by_id(post_id, db)
    if not post:
        return None
    await db.delete(post)
    await db.commit()
    return post
