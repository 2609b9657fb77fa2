"""
Starter markup for the editor.

Selecting a template replaces the editor text wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass


class UnknownTemplateError(KeyError):
    """Raised when a template key is not registered."""


@dataclass(frozen=True)
class OGTemplate:
    key: str
    name: str
    content: str


DEFAULT_MARKUP = """\
<meta property="og:title" content="OG Tag Lab - Open Graph Protocol Testing Playground" />
<meta property="og:description" content="Test, validate, and preview your Open Graph meta tags with live previews for Facebook, Twitter, LinkedIn, and more." />
<meta property="og:type" content="website" />
<meta property="og:url" content="https://example.com" />
<meta property="og:image" content="https://images.unsplash.com/photo-1611224923853-80b023f02d71?w=1200&amp;h=630&amp;fit=crop" />
<meta property="og:site_name" content="OG Tag Lab" />
<meta name="twitter:card" content="summary_large_image" />
<meta name="twitter:title" content="OG Tag Lab - Test Your Open Graph Tags" />
<meta name="twitter:description" content="A playground for testing and validating Open Graph meta tags with real-time social media previews." />
<meta name="twitter:image" content="https://images.unsplash.com/photo-1611224923853-80b023f02d71?w=1200&amp;h=630&amp;fit=crop" />"""

TEMPLATES: dict[str, OGTemplate] = {
    "blog": OGTemplate(
        key="blog",
        name="Blog Post",
        content="""\
<meta property="og:title" content="Amazing Blog Post Title" />
<meta property="og:description" content="This is a compelling description of your blog post that will appear when shared on social media." />
<meta property="og:type" content="article" />
<meta property="og:url" content="https://yourblog.com/amazing-post" />
<meta property="og:image" content="https://yourblog.com/images/blog-featured.jpg" />
<meta property="og:site_name" content="Your Blog Name" />
<meta property="article:author" content="Your Name" />
<meta property="article:published_time" content="2024-01-15T08:00:00.000Z" />""",
    ),
    "product": OGTemplate(
        key="product",
        name="Product",
        content="""\
<meta property="og:title" content="Amazing Product Name" />
<meta property="og:description" content="Discover this incredible product that will change your life. Premium quality, amazing features." />
<meta property="og:type" content="product" />
<meta property="og:url" content="https://yourstore.com/products/amazing-product" />
<meta property="og:image" content="https://yourstore.com/images/product-hero.jpg" />
<meta property="og:site_name" content="Your Store" />
<meta property="product:price:amount" content="99.99" />
<meta property="product:price:currency" content="USD" />""",
    ),
    "event": OGTemplate(
        key="event",
        name="Event",
        content="""\
<meta property="og:title" content="Tech Conference 2024" />
<meta property="og:description" content="Join us for the biggest tech conference of the year. Learn from industry experts and network with peers." />
<meta property="og:type" content="website" />
<meta property="og:url" content="https://techconf2024.com" />
<meta property="og:image" content="https://techconf2024.com/images/event-banner.jpg" />
<meta property="og:site_name" content="Tech Conference" />
<meta name="twitter:card" content="summary_large_image" />""",
    ),
}


def list_templates() -> list[OGTemplate]:
    return list(TEMPLATES.values())


def get_template(key: str) -> OGTemplate:
    try:
        return TEMPLATES[key]
    except KeyError:
        raise UnknownTemplateError(key) from None
