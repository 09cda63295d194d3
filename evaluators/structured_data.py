"""
Structured Data Analyzer.

Checks JSON-LD presence, completeness of the Article schema properties
and the FAQ count needed for FAQ rich results.
"""

from typing import List

from models.enums import (
    CategoryName,
    CheckStatus,
    Priority,
    FAQ_THRESHOLDS,
    OFFICIAL_SOURCES,
)
from models.schemas import ChecklistItem, ContentItem

FAQ_TARGET = f"{FAQ_THRESHOLDS['optimal_min']}+ questions"


def analyze_structured_data(item: ContentItem) -> List[ChecklistItem]:
    """
    Analyze structured data of a content item.

    Rules (deterministic):
        JSON-LD: present → pass/high, missing → warning/high
        Schema headline, author, main entity: emitted only when present (pass/high)
        Schema date published: present → pass/high, missing → info/medium
        FAQ count: 0 → info, 1-2 → warning, 3+ → pass (all medium)
    """
    items: List[ChecklistItem] = []

    # An empty JSON-LD object still counts as generated
    if item.json_ld_structured_data is None:
        items.append(ChecklistItem(
            id="jsonld-missing",
            category=CategoryName.STRUCTURED_DATA,
            label="JSON-LD Structured Data",
            status=CheckStatus.WARNING,
            recommendation=(
                "Generate JSON-LD structured data for better search visibility "
                "(will be auto-generated on publish)"
            ),
            field="jsonLdStructuredData",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["structured_data"],
        ))
    else:
        items.append(ChecklistItem(
            id="jsonld-present",
            category=CategoryName.STRUCTURED_DATA,
            label="JSON-LD Structured Data",
            status=CheckStatus.PASS,
            recommendation="JSON-LD structured data is present",
            field="jsonLdStructuredData",
            priority=Priority.HIGH,
        ))

    items.extend(_check_schema_properties(item))
    items.append(_check_faqs(len(item.faqs or [])))
    return items


def _check_schema_properties(item: ContentItem) -> List[ChecklistItem]:
    """Article schema completeness; absent headline/author/main entity emit nothing."""
    items: List[ChecklistItem] = []

    if item.title or item.seo_title:
        items.append(ChecklistItem(
            id="schema-headline",
            category=CategoryName.STRUCTURED_DATA,
            label="Schema: Headline",
            status=CheckStatus.PASS,
            recommendation="Article headline (title) is present",
            field="title",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["article_schema"],
        ))

    if item.author_id:
        items.append(ChecklistItem(
            id="schema-author",
            category=CategoryName.STRUCTURED_DATA,
            label="Schema: Author",
            status=CheckStatus.PASS,
            recommendation="Article author is set",
            field="authorId",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["article_schema"],
        ))

    if item.date_published:
        items.append(ChecklistItem(
            id="schema-date-published",
            category=CategoryName.STRUCTURED_DATA,
            label="Schema: Date Published",
            status=CheckStatus.PASS,
            recommendation="Publication date is set",
            field="datePublished",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["article_schema"],
        ))
    else:
        items.append(ChecklistItem(
            id="schema-date-published-missing",
            category=CategoryName.STRUCTURED_DATA,
            label="Schema: Date Published",
            status=CheckStatus.INFO,
            recommendation="Publication date will be set automatically when article is published",
            field="datePublished",
            priority=Priority.MEDIUM,
            official_source=OFFICIAL_SOURCES["article_schema"],
        ))

    if item.main_entity_of_page or item.canonical_url:
        items.append(ChecklistItem(
            id="schema-main-entity",
            category=CategoryName.STRUCTURED_DATA,
            label="Schema: Main Entity of Page",
            status=CheckStatus.PASS,
            recommendation="Main entity of page is set",
            field="mainEntityOfPage",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["article_schema"],
        ))

    return items


def _check_faqs(faq_count: int) -> ChecklistItem:
    if faq_count == 0:
        return ChecklistItem(
            id="faq-schema-missing",
            category=CategoryName.STRUCTURED_DATA,
            label="FAQ Schema",
            status=CheckStatus.INFO,
            current_value=0,
            target_value=FAQ_TARGET,
            recommendation="Add 3+ FAQs to enable FAQ rich results in search",
            field="faqs",
            priority=Priority.MEDIUM,
            official_source=OFFICIAL_SOURCES["faq"],
        )

    if faq_count < FAQ_THRESHOLDS["optimal_min"]:
        return ChecklistItem(
            id="faq-schema-few",
            category=CategoryName.STRUCTURED_DATA,
            label="FAQ Schema",
            status=CheckStatus.WARNING,
            current_value=faq_count,
            target_value=FAQ_TARGET,
            recommendation=f"Only {faq_count} FAQ(s). Add more (3+ recommended) for FAQ rich results.",
            field="faqs",
            priority=Priority.MEDIUM,
            official_source=OFFICIAL_SOURCES["faq"],
        )

    return ChecklistItem(
        id="faq-schema-optimal",
        category=CategoryName.STRUCTURED_DATA,
        label="FAQ Schema",
        status=CheckStatus.PASS,
        current_value=faq_count,
        target_value=FAQ_TARGET,
        recommendation=f"FAQ schema is optimal ({faq_count} questions)",
        field="faqs",
        priority=Priority.MEDIUM,
    )
