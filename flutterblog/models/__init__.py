from flutterblog.models.post import Post

__all__ = ["Post"]
