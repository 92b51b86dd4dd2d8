from simpleblog.domain.entities.draft import PostDraft, PostPatch
from simpleblog.domain.entities.page import Page
from simpleblog.domain.entities.post import Author, Post, PostMetadata

__all__ = ["Post", "Author", "PostMetadata", "Page", "PostDraft", "PostPatch"]
