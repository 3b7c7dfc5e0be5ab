import feedparser

from src.news.services.media_extractor import (
    extract_media_url,
    from_enclosure,
    from_media_content,
    from_media_thumbnail,
    from_nested_media,
)


class TestMediaContent:
    def test_prefers_raster_image_over_first_listed_svg(self):
        item = {
            "media:content": [
                {"$": {"url": "https://cdn.example.com/logo.svg", "type": "image/svg+xml"}},
                {"$": {"url": "https://cdn.example.com/photo.jpg", "type": "image/jpeg"}},
            ]
        }

        assert extract_media_url(item) == "https://cdn.example.com/photo.jpg"

    def test_prefers_entry_with_image_medium(self):
        item = {
            "media:content": [
                {"$": {"url": "https://cdn.example.com/clip.mp4", "medium": "video"}},
                {"$": {"url": "https://cdn.example.com/still.png", "medium": "image"}},
            ]
        }

        assert from_media_content(item) == "https://cdn.example.com/still.png"

    def test_falls_back_to_first_entry_without_typed_image(self):
        item = {
            "media:content": [
                {"$": {"url": "https://cdn.example.com/first"}},
                {"$": {"url": "https://cdn.example.com/second"}},
            ]
        }

        assert from_media_content(item) == "https://cdn.example.com/first"

    def test_single_object_with_flattened_attributes(self):
        assert from_media_content({"media:content": {"url": "https://a.example.com/x.jpg"}}) == "https://a.example.com/x.jpg"
        assert from_media_content({"media:content": {"@_url": "https://a.example.com/y.jpg"}}) == "https://a.example.com/y.jpg"

    def test_feedparser_media_content_shape(self):
        item = {"media_content": [{"url": "https://a.example.com/z.jpg", "medium": "image"}]}

        assert from_media_content(item) == "https://a.example.com/z.jpg"


class TestOtherStrategies:
    def test_nested_media_content(self):
        item = {"media": {"content": [{"$": {"url": "https://a.example.com/n.jpg", "type": "image/jpeg"}}]}}

        assert from_nested_media(item) == "https://a.example.com/n.jpg"

    def test_media_thumbnail(self):
        assert from_media_thumbnail({"media:thumbnail": {"$": {"url": "https://a.example.com/t.jpg"}}}) == "https://a.example.com/t.jpg"
        assert from_media_thumbnail({"media_thumbnail": [{"url": "https://a.example.com/t2.jpg"}]}) == "https://a.example.com/t2.jpg"

    def test_enclosure_requires_image_type(self):
        audio = {"enclosure": {"$": {"url": "https://a.example.com/ep.mp3", "type": "audio/mpeg"}}}
        image = {"enclosure": {"url": "https://a.example.com/e.png", "type": "image/png"}}

        assert from_enclosure(audio) is None
        assert from_enclosure(image) == "https://a.example.com/e.png"

    def test_feedparser_enclosures_use_href(self):
        item = {"enclosures": [
            {"href": "https://a.example.com/ep.mp3", "type": "audio/mpeg"},
            {"href": "https://a.example.com/cover.jpg", "type": "image/jpeg"},
        ]}

        assert from_enclosure(item) == "https://a.example.com/cover.jpg"


class TestExtractMediaUrl:
    def test_priority_order(self):
        item = {
            "media:thumbnail": {"url": "https://a.example.com/thumb.jpg"},
            "media:content": {"url": "https://a.example.com/content.jpg"},
        }

        assert extract_media_url(item) == "https://a.example.com/content.jpg"

    def test_no_media_returns_empty_string(self):
        assert extract_media_url({"title": "No pictures"}) == ""

    def test_malformed_values_never_raise(self):
        item = {"media:content": 42, "media": "nope", "media:thumbnail": [None], "enclosure": ["x"]}

        assert extract_media_url(item) == ""

    def test_parsed_feed_entry(self):
        rss = """<?xml version="1.0"?>
        <rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
          <channel><title>Example</title>
            <item>
              <title>Story</title>
              <link>https://news.example.com/story</link>
              <media:content url="https://cdn.example.com/story.jpg" medium="image" type="image/jpeg"/>
            </item>
          </channel>
        </rss>"""

        entry = feedparser.parse(rss).entries[0]

        assert extract_media_url(entry) == "https://cdn.example.com/story.jpg"
