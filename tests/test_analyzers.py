"""
Unit tests for the field analyzers and the off-page advisor.

Each analyzer is called directly on a content item; thresholds are
checked at their exact boundaries.
"""

import pytest
from evaluators.content_quality import analyze_content_quality, resolve_word_count
from evaluators.images import analyze_images
from evaluators.meta_tags import analyze_meta_tags
from evaluators.mobile import analyze_mobile
from evaluators.off_page import advise_off_page
from evaluators.structured_data import analyze_structured_data
from evaluators.technical import analyze_technical
from models.enums import CategoryName, CheckStatus, OffPageCategory, Priority
from models.schemas import ContentItem, FAQ


def by_field(items, field):
    return [item for item in items if item.field == field]


class TestMetaTags:
    """Tests for analyze_meta_tags."""

    @pytest.mark.parametrize("length,expected_id,status,priority", [
        (0, "seo-title-missing", CheckStatus.FAIL, Priority.CRITICAL),
        (1, "seo-title-short", CheckStatus.WARNING, Priority.HIGH),
        (29, "seo-title-short", CheckStatus.WARNING, Priority.HIGH),
        (30, "seo-title-optimal", CheckStatus.PASS, Priority.HIGH),
        (60, "seo-title-optimal", CheckStatus.PASS, Priority.HIGH),
        (61, "seo-title-long", CheckStatus.WARNING, Priority.MEDIUM),
    ])
    def test_title_length_buckets(self, length, expected_id, status, priority):
        items = analyze_meta_tags(ContentItem(seo_title="t" * length))
        title = by_field(items, "seoTitle")

        assert len(title) == 1
        assert title[0].id == expected_id
        assert title[0].status == status
        assert title[0].priority == priority

    @pytest.mark.parametrize("length,expected_id,status,priority", [
        (0, "seo-description-missing", CheckStatus.FAIL, Priority.CRITICAL),
        (119, "seo-description-short", CheckStatus.WARNING, Priority.HIGH),
        (120, "seo-description-optimal", CheckStatus.PASS, Priority.HIGH),
        (160, "seo-description-optimal", CheckStatus.PASS, Priority.HIGH),
        (161, "seo-description-long", CheckStatus.WARNING, Priority.MEDIUM),
    ])
    def test_description_length_buckets(self, length, expected_id, status, priority):
        items = analyze_meta_tags(ContentItem(seo_description="d" * length))
        description = by_field(items, "seoDescription")

        assert len(description) == 1
        assert description[0].id == expected_id
        assert description[0].status == status
        assert description[0].priority == priority

    def test_title_falls_back_to_article_title(self):
        items = analyze_meta_tags(ContentItem(seo_title="", title="t" * 40))
        title = by_field(items, "seoTitle")[0]
        assert title.status == CheckStatus.PASS
        assert title.current_value == 40

    def test_description_falls_back_to_excerpt(self):
        items = analyze_meta_tags(ContentItem(excerpt="e" * 130))
        description = by_field(items, "seoDescription")[0]
        assert description.id == "seo-description-optimal"
        assert description.current_value == 130

    def test_robots_default_passes(self):
        robots = by_field(analyze_meta_tags(ContentItem()), "metaRobots")[0]
        assert robots.status == CheckStatus.PASS
        assert robots.priority == Priority.MEDIUM
        assert robots.current_value == "index, follow"

    def test_robots_noindex_warns(self):
        robots = by_field(analyze_meta_tags(ContentItem(meta_robots="noindex, follow")), "metaRobots")[0]
        assert robots.id == "meta-robots-noindex"
        assert robots.status == CheckStatus.WARNING
        assert robots.priority == Priority.HIGH

    def test_long_title_recommendation_embeds_length(self):
        title = by_field(analyze_meta_tags(ContentItem(seo_title="t" * 75)), "seoTitle")[0]
        assert "75" in title.recommendation


class TestContentQuality:
    """Tests for analyze_content_quality."""

    @pytest.mark.parametrize("word_count,expected_id,status", [
        (0, "word-count-missing", CheckStatus.FAIL),
        (1, "word-count-low", CheckStatus.FAIL),
        (299, "word-count-low", CheckStatus.FAIL),
        (300, "word-count-short", CheckStatus.WARNING),
        (799, "word-count-short", CheckStatus.WARNING),
        (800, "word-count-optimal", CheckStatus.PASS),
        (3000, "word-count-optimal", CheckStatus.PASS),
        (3001, "word-count-long", CheckStatus.INFO),
    ])
    def test_exactly_one_word_count_bucket(self, word_count, expected_id, status):
        items = analyze_content_quality(ContentItem(word_count=word_count))
        length_items = [item for item in items if item.id.startswith("word-count-")]

        assert len(length_items) == 1
        assert length_items[0].id == expected_id
        assert length_items[0].status == status

    def test_word_count_derived_from_content(self):
        item = ContentItem(content="<p>" + "word " * 850 + "</p>", in_language="en")
        assert resolve_word_count(item) == 850
        items = analyze_content_quality(item)
        assert items[0].id == "word-count-optimal"

    def test_explicit_word_count_wins(self):
        item = ContentItem(content="only three words", word_count=1200)
        assert resolve_word_count(item) == 1200

    def test_null_content_is_missing(self):
        items = analyze_content_quality(ContentItem(content=None))
        assert items[0].id == "word-count-missing"
        assert items[0].current_value == 0

    def test_arabic_content_counted_by_default(self):
        item = ContentItem(content="مَرْحَبًا بِالْعَالَمِ")
        assert resolve_word_count(item) == 2

    def test_content_depth_set(self):
        depth = by_field(analyze_content_quality(ContentItem(word_count=900, content_depth="medium")), "contentDepth")[0]
        assert depth.status == CheckStatus.PASS
        assert depth.priority == Priority.LOW

    def test_content_depth_missing_suggests_value(self):
        depth = by_field(analyze_content_quality(ContentItem(word_count=1600)), "contentDepth")[0]
        assert depth.status == CheckStatus.INFO
        assert depth.priority == Priority.LOW
        assert "long" in depth.recommendation


class TestImages:
    """Tests for analyze_images."""

    def test_featured_image_present(self):
        items = analyze_images(ContentItem(featured_image_id="img1"))
        assert len(items) == 1
        assert items[0].status == CheckStatus.PASS
        assert items[0].priority == Priority.HIGH

    def test_featured_image_missing(self):
        items = analyze_images(ContentItem(featured_image_id=""))
        assert items[0].id == "featured-image-missing"
        assert items[0].status == CheckStatus.FAIL
        assert items[0].priority == Priority.CRITICAL


class TestStructuredData:
    """Tests for analyze_structured_data."""

    def test_bare_item(self):
        """JSON-LD warning, date info and FAQ info; nothing else emitted."""
        items = analyze_structured_data(ContentItem())
        assert [item.id for item in items] == [
            "jsonld-missing",
            "schema-date-published-missing",
            "faq-schema-missing",
        ]
        assert [item.status for item in items] == [
            CheckStatus.WARNING,
            CheckStatus.INFO,
            CheckStatus.INFO,
        ]

    def test_empty_json_ld_object_counts_as_present(self):
        items = analyze_structured_data(ContentItem(json_ld_structured_data={}))
        assert items[0].id == "jsonld-present"
        assert items[0].status == CheckStatus.PASS

    def test_complete_schema(self):
        items = analyze_structured_data(ContentItem(
            json_ld_structured_data={"@type": "Article"},
            title="Headline",
            author_id="author-1",
            date_published="2024-05-01T10:00:00Z",
            main_entity_of_page="https://x.com/a",
            faqs=[FAQ(), FAQ(), FAQ()],
        ))
        assert [item.id for item in items] == [
            "jsonld-present",
            "schema-headline",
            "schema-author",
            "schema-date-published",
            "schema-main-entity",
            "faq-schema-optimal",
        ]
        assert all(item.status == CheckStatus.PASS for item in items)

    def test_canonical_url_satisfies_main_entity(self):
        ids = [item.id for item in analyze_structured_data(ContentItem(canonical_url="https://x.com/a"))]
        assert "schema-main-entity" in ids

    @pytest.mark.parametrize("count,expected_id,status", [
        (0, "faq-schema-missing", CheckStatus.INFO),
        (1, "faq-schema-few", CheckStatus.WARNING),
        (2, "faq-schema-few", CheckStatus.WARNING),
        (3, "faq-schema-optimal", CheckStatus.PASS),
        (7, "faq-schema-optimal", CheckStatus.PASS),
    ])
    def test_faq_buckets(self, count, expected_id, status):
        items = analyze_structured_data(ContentItem(faqs=[FAQ() for _ in range(count)]))
        faq = by_field(items, "faqs")[0]
        assert faq.id == expected_id
        assert faq.status == status
        assert faq.priority == Priority.MEDIUM
        assert faq.current_value == count

    def test_few_faqs_recommendation_embeds_count(self):
        faq = by_field(analyze_structured_data(ContentItem(faqs=[FAQ()])), "faqs")[0]
        assert "Only 1 FAQ" in faq.recommendation


class TestTechnical:
    """Tests for analyze_technical."""

    def test_canonical_missing(self):
        items = analyze_technical(ContentItem())
        assert len(items) == 1
        assert items[0].id == "canonical-missing"
        assert items[0].status == CheckStatus.WARNING
        assert items[0].priority == Priority.HIGH

    def test_canonical_not_https_has_distinct_message(self):
        missing = analyze_technical(ContentItem())[0]
        insecure = analyze_technical(ContentItem(canonical_url="http://x.com"))[0]

        assert insecure.id == "canonical-not-https"
        assert insecure.status == CheckStatus.WARNING
        assert insecure.priority == Priority.HIGH
        assert "HTTPS" in insecure.recommendation
        assert insecure.recommendation != missing.recommendation

    def test_canonical_https_passes(self):
        items = analyze_technical(ContentItem(canonical_url="https://x.com/a"))
        assert items[0].id == "canonical-ok"
        assert items[0].status == CheckStatus.PASS

    def test_sitemap_settings(self):
        items = analyze_technical(ContentItem(sitemap_priority=0.0, sitemap_change_freq="weekly"))
        assert [item.id for item in items] == [
            "canonical-missing",
            "sitemap-priority",
            "sitemap-change-freq",
        ]
        assert items[1].status == CheckStatus.PASS
        assert items[1].priority == Priority.LOW
        assert items[2].current_value == "weekly"


class TestMobile:
    """Tests for analyze_mobile."""

    @pytest.mark.parametrize("item", [ContentItem(), ContentItem(featured_image_id="img1", word_count=900)])
    def test_two_fixed_info_entries(self, item):
        items = analyze_mobile(item)
        assert [entry.id for entry in items] == ["mobile-friendly", "core-web-vitals"]
        assert all(entry.status == CheckStatus.INFO for entry in items)
        assert all(entry.category == CategoryName.MOBILE for entry in items)


class TestOffPageAdvisor:
    """Tests for advise_off_page."""

    def test_nothing_configured(self):
        recommendations = advise_off_page(ContentItem())

        assert [r.category for r in recommendations] == [
            OffPageCategory.LINK_BUILDING,
            OffPageCategory.SOCIAL_SIGNALS,
            OffPageCategory.AUTHORITY_BUILDING,
            OffPageCategory.CONTENT_DISTRIBUTION,
        ]
        assert all(r.actionable for r in recommendations)
        assert all(r.steps for r in recommendations)

    def test_everything_configured(self):
        recommendations = advise_off_page(ContentItem(
            related_articles=[{"id": "r1", "slug": "other-article"}],
            og_article_author="https://x.com/authors/jane",
            citations=[{"url": "https://example.org/study"}],
        ))
        actionable = {r.id: r.actionable for r in recommendations}

        assert actionable == {
            "internal-linking": False,
            "social-author-attribution": False,
            "authoritative-citations": False,
            "content-distribution-strategy": True,
        }
        assert all(not r.steps for r in recommendations if not r.actionable)

    def test_distribution_always_present(self):
        for item in (ContentItem(), ContentItem(related_articles=[{"id": "r1"}])):
            ids = [r.id for r in advise_off_page(item)]
            assert ids.count("content-distribution-strategy") == 1

    def test_empty_related_articles_is_not_configured(self):
        linking = advise_off_page(ContentItem(related_articles=[]))[0]
        assert linking.actionable

    def test_string_citations_count_as_configured(self):
        """Citations may be plain URLs, as the editorial form sends them."""
        item = ContentItem(citations=["https://example.org/study"])
        citations = [r for r in advise_off_page(item) if r.id == "authoritative-citations"][0]

        assert item.citations == ["https://example.org/study"]
        assert not citations.actionable

    def test_related_article_form_shape(self):
        item = ContentItem(related_articles=[{"relatedId": "r1", "relationshipType": "series"}])
        assert item.related_articles[0].related_id == "r1"
        assert item.related_articles[0].relationship_type == "series"
        assert not advise_off_page(item)[0].actionable


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
