"""
Shared test fixtures for the contenttree test suite.

The sample tree:

    home (1000, invariant)
    └── blog (1100, varies by culture: en-US, fr-FR)
        └── post (1110, varies by culture, composed of "seo")
            └── comment (1111, invariant)
    about (2000, invariant)
"""

from datetime import datetime

import pytest

from contenttree import (
    ContentType,
    CultureInfo,
    InMemoryContentStore,
    PublishedContent,
    PublishedProperty,
    TreeNavigator,
)
from contenttree.core.property import ListValueConverter


class BlogPost(PublishedContent):
    """Strongly typed model for blog posts."""


HOME_TYPE = ContentType(id=1, alias="home")
BLOG_TYPE = ContentType(id=2, alias="blog", varies_by_culture=True)
POST_TYPE = ContentType(
    id=3,
    alias="blogPost",
    composition_aliases=frozenset({"seo", "navigable"}),
    varies_by_culture=True,
)
COMMENT_TYPE = ContentType(id=4, alias="comment")


def _cultures(**names: str) -> dict[str, CultureInfo]:
    return {
        culture.replace("_", "-"): CultureInfo(
            culture=culture.replace("_", "-"),
            name=name,
            url_segment=name.lower().replace(" ", "-"),
            date=datetime(2024, 1, 15),
        )
        for culture, name in names.items()
    }


@pytest.fixture
def make_content():
    """Factory building content snapshots with sensible defaults.

    Usage:
        def test_something(make_content):
            node = make_content(5, "-1,5")
    """

    def _make(
        content_id: int,
        path: str,
        content_type: ContentType = HOME_TYPE,
        cls: type[PublishedContent] = PublishedContent,
        **kwargs,
    ) -> PublishedContent:
        level = len(path.split(",")) - 1
        return cls(id=content_id, path=path, level=level, content_type=content_type, **kwargs)

    return _make


@pytest.fixture
def tree(make_content) -> dict[str, PublishedContent]:
    """The sample tree keyed by role."""
    home = make_content(
        1000,
        "-1,1000",
        HOME_TYPE,
        cultures={"": CultureInfo(name="Home", url_segment="home")},
        properties={
            "siteName": PublishedProperty.invariant("siteName", "Acme"),
            "title": PublishedProperty.invariant("title", "Welcome"),
            "footerLinks": PublishedProperty.invariant(
                "footerLinks", ["/about"], converter=ListValueConverter()
            ),
        },
        template_id=10,
        creator_id=7,
        writer_id=8,
        update_date=datetime(2024, 3, 1),
    )
    blog = make_content(
        1100,
        "-1,1000,1100",
        BLOG_TYPE,
        cultures=_cultures(en_US="Blog", fr_FR="Le blog"),
        properties={
            "title": PublishedProperty(
                "title",
                {"en-US": "Our blog", "fr-FR": "Notre blog"},
                varies_by_culture=True,
            ),
        },
    )
    post = make_content(
        1110,
        "-1,1000,1100,1110",
        POST_TYPE,
        cls=BlogPost,
        cultures=_cultures(en_US="First post", fr_FR="Premier billet"),
        properties={
            "title": PublishedProperty(
                "title",
                {"en-US": "First post", "fr-FR": ""},
                varies_by_culture=True,
            ),
            "tags": PublishedProperty("tags", converter=ListValueConverter()),
            "rating": PublishedProperty.invariant("rating", "4"),
        },
    )
    comment = make_content(
        1111,
        "-1,1000,1100,1110,1111",
        COMMENT_TYPE,
        cultures={"": CultureInfo(name="Nice post")},
        properties={"title": PublishedProperty.invariant("title", None)},
    )
    about = make_content(2000, "-1,2000", HOME_TYPE, cultures={"": CultureInfo(name="About")})
    return {"home": home, "blog": blog, "post": post, "comment": comment, "about": about}


@pytest.fixture
def store(tree) -> InMemoryContentStore:
    return InMemoryContentStore(tree.values())


@pytest.fixture
def navigator(store) -> TreeNavigator:
    return TreeNavigator(store)


@pytest.fixture
def blog_post_model() -> type[PublishedContent]:
    return BlogPost
