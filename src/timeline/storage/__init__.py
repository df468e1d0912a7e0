from .storage import MAX_POSTS, PostStorage

__all__ = ["MAX_POSTS", "PostStorage"]
