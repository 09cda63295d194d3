"""
Off-Page Advisor.

Produces advisory recommendations for work done outside the article
(links, social, distribution, authority). Recommendations never affect
the score. Items already covered by the article's configuration are
returned as non-actionable so the editor sees them acknowledged.
"""

from typing import List

from models.enums import OffPageCategory, OffPagePriority
from models.schemas import ContentItem, OffPageRecommendation


def advise_off_page(item: ContentItem) -> List[OffPageRecommendation]:
    """
    Build off-page recommendations for a content item.

    Branches only on related articles, the Open Graph article author and
    citations; the content distribution strategy is always included.
    """
    return [
        _internal_linking(bool(item.related_articles)),
        _social_attribution(bool(item.og_article_author)),
        _authoritative_citations(bool(item.citations)),
        _content_distribution(),
    ]


def _internal_linking(configured: bool) -> OffPageRecommendation:
    if configured:
        return OffPageRecommendation(
            id="internal-linking",
            category=OffPageCategory.LINK_BUILDING,
            title="Internal Linking",
            description="Related articles are linked, which spreads authority across the site.",
            actionable=False,
            priority=OffPagePriority.LOW,
        )

    return OffPageRecommendation(
        id="internal-linking",
        category=OffPageCategory.LINK_BUILDING,
        title="Build Internal Links",
        description=(
            "No related articles are linked. Internal links help search engines "
            "discover the article and pass authority to it."
        ),
        actionable=True,
        steps=[
            "Select 3-5 related articles on the same topic",
            "Link back to this article from older, well-ranking articles",
            "Use descriptive anchor text instead of 'click here'",
        ],
        priority=OffPagePriority.HIGH,
    )


def _social_attribution(configured: bool) -> OffPageRecommendation:
    if configured:
        return OffPageRecommendation(
            id="social-author-attribution",
            category=OffPageCategory.SOCIAL_SIGNALS,
            title="Author Attribution on Social Shares",
            description="The Open Graph article author is set, so shares credit the author.",
            actionable=False,
            priority=OffPagePriority.LOW,
        )

    return OffPageRecommendation(
        id="social-author-attribution",
        category=OffPageCategory.SOCIAL_SIGNALS,
        title="Add Author Attribution for Social Shares",
        description=(
            "The Open Graph article author is missing. Attributed shares build "
            "recognition for the author and the publication."
        ),
        actionable=True,
        steps=[
            "Set the article author profile URL in the Open Graph settings",
            "Share the article from the author's own social accounts",
            "Encourage engagement in the first hours after publishing",
        ],
        priority=OffPagePriority.MEDIUM,
    )


def _authoritative_citations(configured: bool) -> OffPageRecommendation:
    if configured:
        return OffPageRecommendation(
            id="authoritative-citations",
            category=OffPageCategory.AUTHORITY_BUILDING,
            title="Authoritative Sources",
            description="The article cites its sources, which supports trust signals.",
            actionable=False,
            priority=OffPagePriority.LOW,
        )

    return OffPageRecommendation(
        id="authoritative-citations",
        category=OffPageCategory.AUTHORITY_BUILDING,
        title="Cite Authoritative Sources",
        description=(
            "No citations are attached. Referencing primary sources strengthens "
            "expertise and trust signals and invites reciprocal links."
        ),
        actionable=True,
        steps=[
            "Add citations for statistics, quotes and claims",
            "Prefer official, academic or primary sources",
            "Notify cited organizations once the article is live",
        ],
        priority=OffPagePriority.MEDIUM,
    )


def _content_distribution() -> OffPageRecommendation:
    return OffPageRecommendation(
        id="content-distribution-strategy",
        category=OffPageCategory.CONTENT_DISTRIBUTION,
        title="Content Distribution Strategy",
        description=(
            "Promote the article beyond the site to earn visits, mentions and "
            "natural backlinks."
        ),
        actionable=True,
        steps=[
            "Include the article in the next newsletter",
            "Share it on the publication's social channels",
            "Submit it to relevant industry communities and aggregators",
            "Repurpose key points into short-form posts linking back",
        ],
        priority=OffPagePriority.MEDIUM,
    )
